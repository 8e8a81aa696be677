from __future__ import annotations
from enum import StrEnum

class ErrorSeverity(StrEnum):
    critical = "critical"
    major = "major"
    minor = "minor"
    warning = "warning"
