from qcprobe.domain.enums.codec_type import CodecType
from qcprobe.domain.enums.error_severity import ErrorSeverity
from qcprobe.domain.enums.indicator_source import IndicatorSource
from qcprobe.domain.enums.probe_step import ProbeStep
from qcprobe.domain.enums.track_type import TrackType
__all__ = [
    "CodecType",
    "ErrorSeverity",
    "IndicatorSource",
    "ProbeStep",
    "TrackType",
]
