# qcprobe/services/schemas/imf.py
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from qcprobe.domain.enums.track_type import TrackType
from qcprobe.services.schemas.analysis import ValidationReportRead


class CPLRequest(BaseModel):
    package: str = Field(..., min_length=1, description="Package directory, relative to the IMF package root",
                         examples=["MY_FEATURE_IMP"])


class ResourceRead(BaseModel):
    id: str
    edit_rate: str = ""
    intrinsic_duration: str = ""
    entry_point: str = ""
    source_duration: str = ""

    model_config = ConfigDict(from_attributes=True)


class TrackRead(BaseModel):
    id: str
    type: TrackType = TrackType.unknown
    resources: List[ResourceRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class SegmentRead(BaseModel):
    id: str
    tracks: List[TrackRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class CPLAnalysisRead(BaseModel):
    cpl_exists: bool = False
    cpl_file: Optional[Path] = None
    candidate_files: List[Path] = Field(default_factory=list)
    cpl_id: str = ""
    title: str = ""
    edit_rate: str = ""
    duration: str = ""
    segment_count: int = 0
    virtual_track_count: int = 0
    video_track_count: int = 0
    audio_track_count: int = 0
    subtitle_track_count: int = 0
    segments: List[SegmentRead] = Field(default_factory=list)
    validation: ValidationReportRead

    model_config = ConfigDict(from_attributes=True)
