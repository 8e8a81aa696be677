# qcprobe/services/mappers/analysis.py
from __future__ import annotations

from qcprobe.common.probe.ffprobe_helpers import parse_ffprobe
from qcprobe.domain.dataclasses.analysis import (
    BitDepthAnalysis,
    ContainerAnalysis,
    DataIntegrityAnalysis,
    FrameRateAnalysis,
)
from qcprobe.domain.entities.probe import FFprobeResult
from qcprobe.services.schemas.analysis import (
    BitDepthAnalysisRead,
    ContainerAnalysisRead,
    DataIntegrityAnalysisRead,
    FrameRateAnalysisRead,
)
from qcprobe.services.schemas.probe import ProbePayload


def to_probe_result(payload: ProbePayload) -> FFprobeResult:
    return parse_ffprobe(payload.model_dump())


def to_bit_depth_read(analysis: BitDepthAnalysis) -> BitDepthAnalysisRead:
    return BitDepthAnalysisRead.model_validate(analysis)


def to_frame_rate_read(analysis: FrameRateAnalysis) -> FrameRateAnalysisRead:
    return FrameRateAnalysisRead.model_validate(analysis)


def to_container_read(analysis: ContainerAnalysis) -> ContainerAnalysisRead:
    return ContainerAnalysisRead.model_validate(analysis)


def to_integrity_read(analysis: DataIntegrityAnalysis) -> DataIntegrityAnalysisRead:
    return DataIntegrityAnalysisRead.model_validate(analysis)
