# qcprobe/services/schemas/analysis.py
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from qcprobe.domain.enums.error_severity import ErrorSeverity
from qcprobe.domain.enums.indicator_source import IndicatorSource


class _ReadModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=False)


# ---------- Reports ----------
class ValidationReportRead(_ReadModel):
    is_valid: bool = True
    issues: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class IntegrityReportRead(ValidationReportRead):
    score: int = Field(100, ge=0, le=100)
    broadcast_compliant: bool = False
    streaming_compliant: bool = False
    required_actions: List[str] = Field(default_factory=list)


# ---------- Resolved attributes ----------
class IndicatorRead(_ReadModel):
    value: float
    origin: IndicatorSource


class ResolvedAttributeRead(_ReadModel):
    source: IndicatorSource
    is_consistent: bool = True
    indicators: List[IndicatorRead] = Field(default_factory=list)


class VideoBitDepthRead(ResolvedAttributeRead):
    value: int
    pixel_format: Optional[str] = None
    profile_indicated_depth: int = 0


class AudioBitDepthRead(ResolvedAttributeRead):
    value: int
    sample_format: Optional[str] = None


class VideoFrameRateRead(ResolvedAttributeRead):
    value: float
    real_frame_rate: float = 0.0
    average_frame_rate: float = 0.0
    is_variable_frame_rate: bool = False
    is_interlaced: bool = False
    standard: str = "Unknown"
    category: str = "Unknown"
    frame_duration_ms: float = 0.0


# ---------- Analyses ----------
class BitDepthAnalysisRead(_ReadModel):
    video_streams: Dict[int, VideoBitDepthRead] = Field(default_factory=dict)
    audio_streams: Dict[int, AudioBitDepthRead] = Field(default_factory=dict)
    max_video_bit_depth: int = 0
    max_audio_bit_depth: int = 0
    is_hdr: bool = False
    is_high_bit_depth: bool = False
    validation: ValidationReportRead


class FrameRateAnalysisRead(_ReadModel):
    video_streams: Dict[int, VideoFrameRateRead] = Field(default_factory=dict)
    max_frame_rate: float = 0.0
    min_frame_rate: float = 0.0
    primary_standard: str = ""
    is_variable_frame_rate: bool = False
    is_high_frame_rate: bool = False
    has_multiple_frame_rates: bool = False
    is_interlaced: bool = False
    validation: ValidationReportRead


class ContainerInfoRead(_ReadModel):
    description: str = ""
    mime_type: str = ""
    extensions: List[str] = Field(default_factory=list)
    standardized_by: str = ""
    year_introduced: int = 0
    is_open_standard: bool = True


class ContainerAnalysisRead(_ReadModel):
    format_name: str = Field("", examples=["mov,mp4,m4a,3gp,3g2,mj2"])
    format_long_name: Optional[str] = None
    filename: Optional[str] = None
    family: str = Field("", examples=["MP4"])
    info: ContainerInfoRead
    duration: float = 0.0
    file_size: int = 0
    overall_bit_rate: int = 0
    stream_count: int = 0
    program_count: int = 0
    probe_score: int = 0
    tags: Dict[str, str] = Field(default_factory=dict)
    is_streaming_friendly: bool = False
    validation: ValidationReportRead


class ErrorRecordRead(_ReadModel):
    type: str = "format_error"
    code: int
    message: str = ""
    severity: ErrorSeverity


class DataIntegrityAnalysisRead(_ReadModel):
    errors: List[ErrorRecordRead] = Field(default_factory=list)
    format_errors: int = 0
    bitstream_errors: int = 0
    packet_errors: int = 0
    continuity_errors: int = 0
    data_hashes: Dict[str, str] = Field(default_factory=dict)
    is_corrupted: bool = False
    validation: IntegrityReportRead
