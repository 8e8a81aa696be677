import dataclasses

import pytest

from qcprobe.domain.entities.probe import FFprobeResult, FormatInfo, StreamInfo


def test_stream_defaults_are_absent_not_zero():
    s = StreamInfo(index=0, codec_type="video")
    assert s.bits_per_sample is None
    assert s.bits_per_raw_sample is None
    assert s.avg_frame_rate is None


def test_records_are_frozen():
    f = FormatInfo(format_name="mxf")
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.format_name = "mp4"
    with pytest.raises(TypeError):
        f.tags["title"] = "x"


def test_empty_result():
    r = FFprobeResult()
    assert r.streams == () and r.packets == ()
    assert r.format is None and r.error is None
