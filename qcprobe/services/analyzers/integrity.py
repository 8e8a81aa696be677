# qcprobe/services/analyzers/integrity.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from qcprobe.common.logging import get_logger
from qcprobe.common.settings import FeatureFlags
from qcprobe.domain.dataclasses.analysis import DataIntegrityAnalysis, ErrorRecord
from qcprobe.domain.dataclasses.reports import IntegrityReport
from qcprobe.domain.entities.probe import FFprobeResult, PacketInfo, ProbeErrorInfo
from qcprobe.domain.enums.probe_step import ProbeStep
from qcprobe.domain.errors import ProbeError
from qcprobe.domain.policies.integrity_scoring import (
    VALID_FROM,
    IntegrityScore,
    classify_error_severity,
    count_continuity_errors,
    score_integrity,
)
from qcprobe.domain.ports.probe import MediaProbePort

logger = get_logger()

HASH_ALGORITHMS = ("crc32", "md5")
HASHES_EXPECTED_BELOW = 90


def extract_hashes(result: FFprobeResult) -> Dict[str, str]:
    """Hashes reported in `data_hashes`, else in the container tags."""
    hashes: Dict[str, str] = {}
    tags = result.format.tags if result.format else {}
    for algorithm in HASH_ALGORITHMS:
        value = result.data_hashes.get(algorithm) or tags.get(algorithm)
        if value:
            hashes[algorithm] = value
    return hashes


class DataIntegrityAnalyzer:
    """
    Scores a file's data integrity from probe error blocks, packet timestamps
    and optional data hashes.

    `analyze(path)` drives the probe through up to three passes
    (errors, hashes, packets); a pass that fails is logged and skipped.
    `evaluate(...)` is the pure scoring step and needs no probe.
    """

    def __init__(self, probe: Optional[MediaProbePort] = None, features: Optional[FeatureFlags] = None):
        self.probe = probe
        self.features = features or FeatureFlags()

    # ---- probe orchestration ----
    def analyze(self, path: Path) -> DataIntegrityAnalysis:
        if self.probe is None:
            raise ProbeError("No probe configured for data integrity analysis")

        errors: List[ProbeErrorInfo] = []
        hashes: Dict[str, str] = {}
        packets: Tuple[PacketInfo, ...] = ()

        result = self._run_step(path, ProbeStep.errors)
        if result is not None and result.error is not None:
            errors.append(result.error)

        if self.features.integrity_hashes:
            result = self._run_step(path, ProbeStep.hashes)
            if result is not None:
                hashes = extract_hashes(result)

        if self.features.integrity_packets:
            result = self._run_step(path, ProbeStep.packets)
            if result is not None:
                packets = result.packets

        return self.evaluate(errors, packets, hashes)

    def _run_step(self, path: Path, step: ProbeStep) -> Optional[FFprobeResult]:
        try:
            return self.probe.probe(path, step)
        except ProbeError as e:
            logger.warning("Integrity probe step %s failed for %s: %s", step, path, e)
            return None

    # ---- pure evaluation ----
    def evaluate(
        self,
        errors: Iterable[ProbeErrorInfo] = (),
        packets: Iterable[PacketInfo] = (),
        hashes: Optional[Mapping[str, str]] = None,
    ) -> DataIntegrityAnalysis:
        analysis = DataIntegrityAnalysis(data_hashes=dict(hashes or {}))

        for error in errors:
            analysis.errors.append(ErrorRecord(
                code=error.code,
                message=error.message,
                severity=classify_error_severity(error.code),
            ))
            lowered = error.message.lower()
            if "format" in lowered:
                analysis.format_errors += 1
            if "bitstream" in lowered:
                analysis.bitstream_errors += 1

        packets = list(packets)
        # Every listed packet counts until per-packet error flags are parsed
        analysis.packet_errors = len(packets)
        analysis.continuity_errors = count_continuity_errors(packets)

        score = score_integrity(
            analysis.errors,
            format_errors=analysis.format_errors,
            bitstream_errors=analysis.bitstream_errors,
            packet_errors=analysis.packet_errors,
            continuity_errors=analysis.continuity_errors,
        )
        analysis.is_corrupted = score.is_corrupted
        analysis.validation = self._report(analysis, score)
        return analysis

    @staticmethod
    def _report(analysis: DataIntegrityAnalysis, score: IntegrityScore) -> IntegrityReport:
        report = IntegrityReport(
            score=score.score,
            broadcast_compliant=score.broadcast_compliant,
            streaming_compliant=score.streaming_compliant,
        )

        if score.score < VALID_FROM:
            report.add_issue("Low data integrity score detected")
        if analysis.format_errors:
            report.add_issue(f"{analysis.format_errors} format errors detected")
            report.add_required_action("Fix format compliance issues")
        if analysis.bitstream_errors:
            report.add_issue(f"{analysis.bitstream_errors} bitstream errors detected")
            report.add_required_action("Re-encode to fix bitstream errors")
        if analysis.continuity_errors:
            report.add_issue(f"{analysis.continuity_errors} continuity errors detected")
            report.add_required_action("Fix timestamp continuity issues")

        if score.score < HASHES_EXPECTED_BELOW and not analysis.data_hashes:
            report.add_recommendation("Generate data hashes for integrity verification")
        if not score.broadcast_compliant:
            report.add_recommendation("Content may not meet broadcast standards")

        # Validity follows the score, not the issue list
        report.is_valid = score.is_valid
        return report
