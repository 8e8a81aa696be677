# qcprobe/services/analyzers/container.py
from __future__ import annotations

import math
from typing import Optional

from qcprobe.common.logging import get_logger
from qcprobe.domain.dataclasses.analysis import ContainerAnalysis
from qcprobe.domain.dataclasses.reports import ValidationReport
from qcprobe.domain.entities.probe import FormatInfo
from qcprobe.domain.policies.container_families import (
    LEGACY_FAMILIES,
    container_family,
    container_info,
    is_streaming_friendly,
)

logger = get_logger()

UNRELIABLE_PROBE_SCORE = 50
FAILED_PROBE_SCORE = 25
SIZE_TOLERANCE = 0.1


def _to_float(raw: Optional[str]) -> float:
    try:
        value = float(raw) if raw else 0.0
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _to_int(raw: Optional[str]) -> int:
    try:
        return int(raw) if raw else 0
    except ValueError:
        return 0


def _size_mismatch(size: int, duration: float, bit_rate: int) -> bool:
    """File size more than SIZE_TOLERANCE away from duration x bitrate; False when not computable."""
    if size <= 0 or duration <= 0 or bit_rate <= 0:
        return False
    try:
        expected = int(duration * bit_rate / 8)
        if expected <= 0:
            return False
        return abs(size - expected) / expected > SIZE_TOLERANCE
    except OverflowError:
        return False


class ContainerAnalyzer:
    """Classifies the container record and checks it for structural anomalies."""

    def analyze(self, fmt: Optional[FormatInfo]) -> ContainerAnalysis:
        if fmt is None:
            report = ValidationReport()
            report.add_issue("No format information available")
            return ContainerAnalysis(validation=report)

        family = container_family(fmt.format_name)
        analysis = ContainerAnalysis(
            format_name=fmt.format_name,
            format_long_name=fmt.format_long_name,
            filename=fmt.filename,
            family=family,
            info=container_info(family),
            duration=_to_float(fmt.duration),
            file_size=_to_int(fmt.size),
            overall_bit_rate=_to_int(fmt.bit_rate),
            stream_count=fmt.nb_streams,
            program_count=fmt.nb_programs,
            probe_score=fmt.probe_score,
            tags=dict(fmt.tags),
            is_streaming_friendly=is_streaming_friendly(family),
        )
        analysis.validation = self._validate(analysis)
        logger.debug("Container %r classified as %s", fmt.format_name, family)
        return analysis

    @staticmethod
    def _validate(analysis: ContainerAnalysis) -> ValidationReport:
        report = ValidationReport()

        if analysis.probe_score < FAILED_PROBE_SCORE:
            report.add_issue(
                f"Low probe score ({analysis.probe_score}) - container format detection may be unreliable"
            )
        elif analysis.probe_score < UNRELIABLE_PROBE_SCORE:
            report.add_recommendation(
                f"Low probe score ({analysis.probe_score}) - container format detection may be unreliable"
            )

        if analysis.family in LEGACY_FAMILIES:
            report.add_recommendation(
                f"{analysis.family} is a legacy format - consider converting to MP4 or WebM for better compatibility"
            )

        if _size_mismatch(analysis.file_size, analysis.duration, analysis.overall_bit_rate):
            report.add_issue(
                "File size inconsistent with duration and bitrate - possible corruption or incomplete file"
            )

        if not analysis.is_streaming_friendly:
            report.add_recommendation(
                "Container format is not optimized for streaming - consider MP4 with fast-start for web delivery"
            )

        if not analysis.tags:
            report.add_recommendation(
                "No metadata tags found - consider adding title, artist, and other descriptive information"
            )

        if analysis.family == "MPEG-TS" and analysis.program_count == 0:
            report.add_issue("MPEG-TS container has no programs - this may indicate a malformed stream")

        if analysis.stream_count == 0:
            report.add_issue("Container has no streams - this indicates an empty or corrupted file")

        if analysis.duration <= 0:
            report.add_recommendation(
                "Container has no duration information - may indicate live stream or corrupted file"
            )

        return report
