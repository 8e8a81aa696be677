# qcprobe/domain/entities/composition.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from qcprobe.domain.enums.track_type import TrackType


@dataclass(frozen=True)
class Resource:
    """Asset reference inside a virtual track."""
    id: str
    edit_rate: str = ""
    intrinsic_duration: str = ""
    entry_point: str = ""
    source_duration: str = ""


@dataclass(frozen=True)
class Track:
    id: str
    type: TrackType = TrackType.unknown
    resources: Tuple[Resource, ...] = ()


@dataclass(frozen=True)
class Segment:
    id: str
    tracks: Tuple[Track, ...] = ()


@dataclass(frozen=True)
class CompositionPlaylist:
    """
    Root of a parsed composition playlist (CPL):

        CompositionPlaylist -> Segment -> Track -> Resource

    Parsed once from disk and never mutated afterwards.
    """
    id: str
    title: str = ""
    edit_rate: str = ""
    total_duration: str = ""
    segments: Tuple[Segment, ...] = ()

    def iter_tracks(self) -> Iterator[Track]:
        for segment in self.segments:
            yield from segment.tracks

    def track_types(self) -> Tuple[TrackType, ...]:
        """Distinct track types across all segments, in first-seen order."""
        seen: list[TrackType] = []
        for track in self.iter_tracks():
            if track.type not in seen:
                seen.append(track.type)
        return tuple(seen)
