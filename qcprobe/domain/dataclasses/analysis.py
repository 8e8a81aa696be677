# qcprobe/domain/dataclasses/analysis.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from qcprobe.domain.dataclasses.attributes import AudioBitDepth, VideoBitDepth, VideoFrameRate
from qcprobe.domain.dataclasses.reports import IntegrityReport, ValidationReport
from qcprobe.domain.entities.composition import Segment
from qcprobe.domain.enums.error_severity import ErrorSeverity


# ---------------------------------------------------------------------------
# Bit depth
# ---------------------------------------------------------------------------
@dataclass
class BitDepthAnalysis:
    video_streams: Dict[int, VideoBitDepth] = field(default_factory=dict)
    audio_streams: Dict[int, AudioBitDepth] = field(default_factory=dict)
    max_video_bit_depth: int = 0
    max_audio_bit_depth: int = 0
    is_hdr: bool = False
    is_high_bit_depth: bool = False
    validation: ValidationReport = field(default_factory=ValidationReport)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Frame rate
# ---------------------------------------------------------------------------
@dataclass
class FrameRateAnalysis:
    video_streams: Dict[int, VideoFrameRate] = field(default_factory=dict)
    max_frame_rate: float = 0.0
    min_frame_rate: float = 0.0
    primary_standard: str = ""
    is_variable_frame_rate: bool = False
    is_high_frame_rate: bool = False
    has_multiple_frame_rates: bool = False
    is_interlaced: bool = False
    validation: ValidationReport = field(default_factory=ValidationReport)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ContainerInfo:
    description: str = ""
    mime_type: str = ""
    extensions: Tuple[str, ...] = ()
    standardized_by: str = ""
    year_introduced: int = 0
    is_open_standard: bool = True


@dataclass
class ContainerAnalysis:
    format_name: str = ""
    format_long_name: Optional[str] = None
    filename: Optional[str] = None
    family: str = ""
    info: ContainerInfo = field(default_factory=ContainerInfo)
    duration: float = 0.0
    file_size: int = 0
    overall_bit_rate: int = 0
    stream_count: int = 0
    program_count: int = 0
    probe_score: int = 0
    tags: Mapping[str, str] = field(default_factory=dict)
    is_streaming_friendly: bool = False
    validation: ValidationReport = field(default_factory=ValidationReport)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Data integrity
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ErrorRecord:
    code: int
    message: str
    severity: ErrorSeverity
    type: str = "format_error"


@dataclass
class DataIntegrityAnalysis:
    errors: List[ErrorRecord] = field(default_factory=list)
    format_errors: int = 0
    bitstream_errors: int = 0
    packet_errors: int = 0
    continuity_errors: int = 0
    data_hashes: Dict[str, str] = field(default_factory=dict)
    is_corrupted: bool = False
    validation: IntegrityReport = field(default_factory=IntegrityReport)

    def errors_by_severity(self, severity: ErrorSeverity) -> List[ErrorRecord]:
        return [e for e in self.errors if e.severity == severity]

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Composition playlist
# ---------------------------------------------------------------------------
@dataclass
class CPLAnalysis:
    cpl_exists: bool = False
    cpl_file: Optional[Path] = None
    # Every discovered candidate; only the first one is parsed
    candidate_files: List[Path] = field(default_factory=list)
    cpl_id: str = ""
    title: str = ""
    edit_rate: str = ""
    duration: str = ""
    segment_count: int = 0
    virtual_track_count: int = 0
    video_track_count: int = 0
    audio_track_count: int = 0
    subtitle_track_count: int = 0
    segments: List[Segment] = field(default_factory=list)
    validation: ValidationReport = field(default_factory=ValidationReport)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
