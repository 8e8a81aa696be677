import logging

from qcprobe.common.logging import get_logger


def test_module_loggers_keep_configured_level():
    configured = get_logger("qcprobe.test", level="debug")
    assert configured.level == logging.DEBUG
    # later module-level lookups must not reset it
    assert get_logger("qcprobe.test").level == logging.DEBUG


def test_default_level_when_unset():
    assert get_logger("qcprobe.fresh").level == logging.INFO
