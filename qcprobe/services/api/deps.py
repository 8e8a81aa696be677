# qcprobe/services/api/deps.py
from __future__ import annotations

from fastapi import Depends

from qcprobe.common.settings import Settings, get_settings
from qcprobe.services.analyzers.bit_depth import BitDepthAnalyzer
from qcprobe.services.analyzers.container import ContainerAnalyzer
from qcprobe.services.analyzers.frame_rate import FrameRateAnalyzer
from qcprobe.services.analyzers.integrity import DataIntegrityAnalyzer
from qcprobe.services.imf.cpl import CPLAnalyzer


def get_bit_depth_analyzer() -> BitDepthAnalyzer:
    return BitDepthAnalyzer()


def get_frame_rate_analyzer() -> FrameRateAnalyzer:
    return FrameRateAnalyzer()


def get_container_analyzer() -> ContainerAnalyzer:
    return ContainerAnalyzer()


def get_integrity_analyzer() -> DataIntegrityAnalyzer:
    """
    Evaluation-only analyzer: the API receives probe output in the request body,
    so no MediaProbePort is wired here. Feature flags only gate analyze(), which
    the API never calls.
    """
    return DataIntegrityAnalyzer()


def get_cpl_analyzer(settings: Settings = Depends(get_settings)) -> CPLAnalyzer:
    return CPLAnalyzer(patterns=settings.imf.cpl_patterns)
