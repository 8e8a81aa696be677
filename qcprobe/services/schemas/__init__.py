from qcprobe.services.schemas.probe import (
    ProbePayload,
)
from qcprobe.services.schemas.analysis import (
    ValidationReportRead,
    IntegrityReportRead,
    BitDepthAnalysisRead,
    FrameRateAnalysisRead,
    ContainerAnalysisRead,
    DataIntegrityAnalysisRead,
)
from qcprobe.services.schemas.imf import (
    CPLRequest,
    CPLAnalysisRead,
)
__all__ = [
    "ProbePayload",
    "ValidationReportRead",
    "IntegrityReportRead",
    "BitDepthAnalysisRead",
    "FrameRateAnalysisRead",
    "ContainerAnalysisRead",
    "DataIntegrityAnalysisRead",
    "CPLRequest",
    "CPLAnalysisRead",
]
