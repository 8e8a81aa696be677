# qcprobe/services/api/routers/analysis.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from qcprobe.common.settings import get_settings
from qcprobe.services.analyzers.bit_depth import BitDepthAnalyzer
from qcprobe.services.analyzers.container import ContainerAnalyzer
from qcprobe.services.analyzers.frame_rate import FrameRateAnalyzer
from qcprobe.services.analyzers.integrity import DataIntegrityAnalyzer, extract_hashes
from qcprobe.services.api.deps import (
    get_bit_depth_analyzer,
    get_container_analyzer,
    get_frame_rate_analyzer,
    get_integrity_analyzer,
)
from qcprobe.services.mappers.analysis import (
    to_bit_depth_read,
    to_container_read,
    to_frame_rate_read,
    to_integrity_read,
    to_probe_result,
)
from qcprobe.services.schemas.analysis import (
    BitDepthAnalysisRead,
    ContainerAnalysisRead,
    DataIntegrityAnalysisRead,
    FrameRateAnalysisRead,
)
from qcprobe.services.schemas.probe import ProbePayload

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/analysis", tags=["analysis"])


@router.post("/bit-depth", response_model=BitDepthAnalysisRead)
def analyze_bit_depth(
    payload: ProbePayload,
    analyzer: BitDepthAnalyzer = Depends(get_bit_depth_analyzer),
) -> BitDepthAnalysisRead:
    result = to_probe_result(payload)
    return to_bit_depth_read(analyzer.analyze(result.streams))


@router.post("/frame-rate", response_model=FrameRateAnalysisRead)
def analyze_frame_rate(
    payload: ProbePayload,
    analyzer: FrameRateAnalyzer = Depends(get_frame_rate_analyzer),
) -> FrameRateAnalysisRead:
    result = to_probe_result(payload)
    return to_frame_rate_read(analyzer.analyze(result.streams))


@router.post("/container", response_model=ContainerAnalysisRead)
def analyze_container(
    payload: ProbePayload,
    analyzer: ContainerAnalyzer = Depends(get_container_analyzer),
) -> ContainerAnalysisRead:
    result = to_probe_result(payload)
    return to_container_read(analyzer.analyze(result.format))


@router.post("/integrity", response_model=DataIntegrityAnalysisRead)
def analyze_integrity(
    payload: ProbePayload,
    analyzer: DataIntegrityAnalyzer = Depends(get_integrity_analyzer),
) -> DataIntegrityAnalysisRead:
    result = to_probe_result(payload)
    errors = [result.error] if result.error is not None else []
    analysis = analyzer.evaluate(errors, result.packets, extract_hashes(result))
    return to_integrity_read(analysis)
