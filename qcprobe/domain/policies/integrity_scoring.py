# qcprobe/domain/policies/integrity_scoring.py
"""
Deduction-based integrity score.

    score = 100
          - 30*critical - 15*major - 5*minor - 1*warning
          - 20*format_errors - 15*bitstream_errors - 5*packet_errors - 10*continuity_errors
    clamped at 0
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Optional, Sequence

from qcprobe.domain.dataclasses.analysis import ErrorRecord
from qcprobe.domain.entities.probe import PacketInfo
from qcprobe.domain.enums.error_severity import ErrorSeverity

# Sentinel codes from the probing tool's (FFmpeg) error space
AVERROR_INVALIDDATA = -1094995529
AVERROR_EOF = -541478725
AVERROR_BUFFER_TOO_SMALL = -1414092869

SENTINEL_SEVERITIES = MappingProxyType({
    AVERROR_INVALIDDATA: ErrorSeverity.critical,
    AVERROR_EOF: ErrorSeverity.minor,
    AVERROR_BUFFER_TOO_SMALL: ErrorSeverity.major,
})

# Codes below these bands are major / minor; anything else is a warning
MAJOR_CODE_THRESHOLD = -1_000_000_000
MINOR_CODE_THRESHOLD = -1_000

BASE_SCORE = 100
SEVERITY_DEDUCTIONS = MappingProxyType({
    ErrorSeverity.critical: 30,
    ErrorSeverity.major: 15,
    ErrorSeverity.minor: 5,
    ErrorSeverity.warning: 1,
})
FORMAT_ERROR_DEDUCTION = 20
BITSTREAM_ERROR_DEDUCTION = 15
PACKET_ERROR_DEDUCTION = 5
CONTINUITY_ERROR_DEDUCTION = 10

CORRUPTED_BELOW = 50
VALID_FROM = 70
STREAMING_FROM = 80
BROADCAST_FROM = 85


def classify_error_severity(code: int) -> ErrorSeverity:
    if code in SENTINEL_SEVERITIES:
        return SENTINEL_SEVERITIES[code]
    if code < MAJOR_CODE_THRESHOLD:
        return ErrorSeverity.major
    if code < MINOR_CODE_THRESHOLD:
        return ErrorSeverity.minor
    return ErrorSeverity.warning


def count_continuity_errors(packets: Iterable[PacketInfo]) -> int:
    """
    Count timestamps that go backwards, per kind (pts, dts), in arrival order.
    Zero/absent timestamps are unset: never compared and never used as the
    previous value.
    """
    errors = 0
    last_pts: Optional[int] = None
    last_dts: Optional[int] = None
    for packet in packets:
        if packet.pts:
            if last_pts is not None and packet.pts < last_pts:
                errors += 1
            last_pts = packet.pts
        if packet.dts:
            if last_dts is not None and packet.dts < last_dts:
                errors += 1
            last_dts = packet.dts
    return errors


@dataclass(frozen=True)
class IntegrityScore:
    score: int
    is_corrupted: bool
    is_valid: bool
    broadcast_compliant: bool
    streaming_compliant: bool


def score_integrity(
    errors: Sequence[ErrorRecord],
    *,
    format_errors: int = 0,
    bitstream_errors: int = 0,
    packet_errors: int = 0,
    continuity_errors: int = 0,
) -> IntegrityScore:
    score = BASE_SCORE
    for record in errors:
        score -= SEVERITY_DEDUCTIONS[record.severity]
    score -= format_errors * FORMAT_ERROR_DEDUCTION
    score -= bitstream_errors * BITSTREAM_ERROR_DEDUCTION
    score -= packet_errors * PACKET_ERROR_DEDUCTION
    score -= continuity_errors * CONTINUITY_ERROR_DEDUCTION
    score = max(score, 0)

    return IntegrityScore(
        score=score,
        is_corrupted=score < CORRUPTED_BELOW,
        is_valid=score >= VALID_FROM,
        broadcast_compliant=score >= BROADCAST_FROM and format_errors == 0 and bitstream_errors == 0,
        streaming_compliant=score >= STREAMING_FROM and continuity_errors == 0,
    )
