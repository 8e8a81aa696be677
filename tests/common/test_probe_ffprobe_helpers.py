from types import MappingProxyType

from qcprobe.common.probe.ffprobe_helpers import parse_ffprobe, parse_stream


def test_parse_ffprobe_minimal():
    data = {
        "format": {
            "filename": "/media/in/clip.mp4",
            "duration": "12.34",
            "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
            "bit_rate": "123456",
            "size": "190440",
            "probe_score": 100,
            "nb_streams": 2,
            "tags": {"language": "eng"},
        },
        "streams": [
            {
                "index": 0,
                "codec_type": "video",
                "codec_name": "h264",
                "pix_fmt": "yuv420p",
                "width": 1920,
                "height": 1080,
                "r_frame_rate": "30000/1001",
                "avg_frame_rate": "30000/1001",
                "bits_per_raw_sample": "8",
            },
            {"index": 1, "codec_type": "audio", "codec_name": "aac", "sample_fmt": "fltp", "bits_per_sample": 0},
        ],
    }

    out = parse_ffprobe(data)
    assert len(out.streams) == 2
    video, audio = out.streams
    assert video.codec_type == "video"
    assert video.pix_fmt == "yuv420p"
    assert video.bits_per_raw_sample == "8"
    assert video.r_frame_rate == "30000/1001"
    assert audio.sample_fmt == "fltp"
    assert audio.bits_per_sample == 0

    assert out.format is not None
    assert out.format.format_name.startswith("mov,mp4")
    assert out.format.duration == "12.34"
    assert out.format.probe_score == 100
    assert out.format.nb_streams == 2
    assert out.format.tags["language"] == "eng"
    assert out.packets == ()
    assert out.error is None


def test_parse_ffprobe_empty_and_none():
    for data in (None, {}):
        out = parse_ffprobe(data)
        assert out.streams == ()
        assert out.format is None
        assert out.error is None
        assert dict(out.data_hashes) == {}


def test_parse_ffprobe_error_and_packets():
    out = parse_ffprobe({
        "error": {"code": -1094995529, "string": "Invalid data found when processing input"},
        "packets": [{"pts": 100, "dts": 90, "stream_index": 0}, {"pts": "N/A"}],
        "data_hashes": {"md5": "abc"},
    })
    assert out.error.code == -1094995529
    assert "Invalid data" in out.error.message
    assert out.packets[0].pts == 100
    assert out.packets[1].pts is None
    assert out.data_hashes["md5"] == "abc"


def test_absent_fields_are_none_not_zero():
    s = parse_stream({"codec_type": "VIDEO"}, default_index=3)
    assert s.index == 3
    assert s.codec_type == "video"
    assert s.bits_per_sample is None
    assert s.bits_per_raw_sample is None
    assert s.pix_fmt is None


def test_tags_are_read_only():
    out = parse_ffprobe({"format": {"format_name": "matroska,webm", "tags": {"title": "x"}}})
    assert isinstance(out.format.tags, MappingProxyType)
