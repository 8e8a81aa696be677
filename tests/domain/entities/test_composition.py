import dataclasses

import pytest

from qcprobe.domain.entities.composition import CompositionPlaylist, Segment, Track
from qcprobe.domain.enums.track_type import TrackType


def test_track_types_are_distinct_in_first_seen_order():
    cpl = CompositionPlaylist(id="x", segments=(
        Segment(id="s1", tracks=(Track("a1", TrackType.audio), Track("v1", TrackType.video))),
        Segment(id="s2", tracks=(Track("v2", TrackType.video), Track("t1", TrackType.subtitle))),
    ))
    assert cpl.track_types() == (TrackType.audio, TrackType.video, TrackType.subtitle)
    assert [t.id for t in cpl.iter_tracks()] == ["a1", "v1", "v2", "t1"]


def test_composition_is_immutable():
    cpl = CompositionPlaylist(id="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cpl.id = "y"
    assert cpl.track_types() == ()
