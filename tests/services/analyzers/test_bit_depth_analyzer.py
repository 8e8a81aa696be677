from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.indicator_source import IndicatorSource
from qcprobe.services.analyzers.bit_depth import BitDepthAnalyzer


def test_sdr_stereo_file_is_clean():
    streams = [
        StreamInfo(index=0, codec_type="video", pix_fmt="yuv420p", bits_per_raw_sample="8"),
        StreamInfo(index=1, codec_type="audio", sample_fmt="s16"),
        StreamInfo(index=2, codec_type="subtitle"),
    ]
    a = BitDepthAnalyzer().analyze(streams)
    assert set(a.video_streams) == {0}
    assert set(a.audio_streams) == {1}
    assert (a.max_video_bit_depth, a.max_audio_bit_depth) == (8, 16)
    assert a.is_hdr is False
    assert a.is_high_bit_depth is False
    assert a.validation.is_valid is True
    assert a.validation.recommendations == []


def test_ten_bit_video_and_high_res_audio():
    streams = [
        StreamInfo(index=0, codec_type="video", pix_fmt="yuv420p10le", profile="Main 10",
                   color_transfer="smpte2084"),
        StreamInfo(index=1, codec_type="audio", sample_fmt="s32"),
    ]
    a = BitDepthAnalyzer().analyze(streams)
    assert a.video_streams[0].source == IndicatorSource.pixel_format
    assert a.is_hdr is True
    assert a.is_high_bit_depth is True
    assert a.validation.is_valid is True
    assert len(a.validation.recommendations) == 2


def test_inconsistent_streams_are_issues():
    streams = [
        StreamInfo(index=0, codec_type="video", pix_fmt="yuv420p10le", bits_per_raw_sample="12", profile="Main 10"),
        StreamInfo(index=3, codec_type="audio", sample_fmt="s16", bits_per_sample=24),
    ]
    a = BitDepthAnalyzer().analyze(streams)
    assert a.validation.is_valid is False
    assert a.validation.issues[:2] == [
        "Video stream 0 has inconsistent bit depth indicators",
        "Audio stream 3 has inconsistent bit depth indicators",
    ]


def test_hdr_transfer_on_eight_bit_video_is_an_issue():
    streams = [StreamInfo(index=0, codec_type="video", pix_fmt="yuv420p", color_transfer="arib-std-b67")]
    a = BitDepthAnalyzer().analyze(streams)
    assert a.is_hdr is True
    assert a.validation.is_valid is False
    assert any(i.startswith("HDR content detected with 8-bit depth") for i in a.validation.issues)


def test_no_streams():
    a = BitDepthAnalyzer().analyze([])
    assert a.video_streams == {} and a.audio_streams == {}
    assert a.validation.is_valid is True
    assert a.as_dict()["max_video_bit_depth"] == 0
