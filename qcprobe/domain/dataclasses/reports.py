# qcprobe/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Validation report (shared by every analyzer)
# ---------------------------------------------------------------------------
@dataclass
class ValidationReport:
    """Outcome of one analysis pass.

    - issues: hard problems; adding one makes the report invalid
    - recommendations: advisory only, never affect validity
    Both lists keep insertion order.
    """
    is_valid: bool = True
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def add_issue(self, message: str) -> None:
        self.issues.append(message)
        self.is_valid = False

    def add_recommendation(self, message: str) -> None:
        self.recommendations.append(message)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Integrity report (score + compliance flags)
# ---------------------------------------------------------------------------
@dataclass
class IntegrityReport(ValidationReport):
    score: int = 100
    broadcast_compliant: bool = False
    streaming_compliant: bool = False
    required_actions: List[str] = field(default_factory=list)

    def add_required_action(self, action: str) -> None:
        self.required_actions.append(action)

    @property
    def compliance_flags(self) -> Dict[str, bool]:
        return {
            "broadcast": self.broadcast_compliant,
            "streaming": self.streaming_compliant,
        }
