# qcprobe/domain/dataclasses/attributes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from qcprobe.domain.enums.indicator_source import IndicatorSource


@dataclass(frozen=True)
class Indicator:
    """One candidate value and the metadata field it came from."""
    value: int | float
    origin: IndicatorSource


@dataclass(frozen=True)
class ResolvedAttribute:
    """
    The value chosen from possibly conflicting indicators, with provenance.
    `indicators` holds every non-zero candidate that was found, in collection
    order, not only the one that won.
    """
    value: int | float
    source: IndicatorSource
    is_consistent: bool = True
    indicators: Tuple[Indicator, ...] = ()

    @property
    def source_name(self) -> str:
        return str(self.source)


@dataclass(frozen=True)
class VideoBitDepth(ResolvedAttribute):
    pixel_format: Optional[str] = None
    # Recorded even when the profile did not decide the value
    profile_indicated_depth: int = 0


@dataclass(frozen=True)
class AudioBitDepth(ResolvedAttribute):
    sample_format: Optional[str] = None


@dataclass(frozen=True)
class VideoFrameRate(ResolvedAttribute):
    real_frame_rate: float = 0.0
    average_frame_rate: float = 0.0
    is_variable_frame_rate: bool = False
    is_interlaced: bool = False
    standard: str = "Unknown"
    category: str = "Unknown"
    frame_duration_ms: float = 0.0
