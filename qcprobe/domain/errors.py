# qcprobe/domain/errors.py
from __future__ import annotations

from typing import Optional


class QCProbeError(RuntimeError):
    """Base class for failures that stop an analysis before any report exists."""


class ProbeError(QCProbeError):
    """Upstream probe invocation failed (tool missing, non-zero exit, bad output)."""

    def __init__(self, message: str, stderr: Optional[str] = None, rc: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.stderr = stderr
        self.rc = rc


class CompositionParseError(QCProbeError):
    """A composition playlist was found but could not be read or parsed."""
