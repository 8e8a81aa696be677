from __future__ import annotations
from enum import StrEnum

class TrackType(StrEnum):
    video = "video"
    audio = "audio"
    subtitle = "subtitle"
    unknown = "unknown"
