# qcprobe/common/logging.py
from __future__ import annotations

import logging

DEFAULT_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "qcprobe", level: int | str | None = None) -> logging.Logger:
    """
    Return the package logger. Plays nice with Uvicorn when the API runs under it:
    if no handlers are set anywhere, we add a basicConfig once.

    Module-level callers pass no level and inherit whatever was configured;
    the app factory passes `Settings.log_level` once at startup.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level or DEFAULT_LEVEL, format=LOG_FORMAT)
    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(DEFAULT_LEVEL)
    return logger
