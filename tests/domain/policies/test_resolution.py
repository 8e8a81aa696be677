import math

from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.indicator_source import IndicatorSource
from qcprobe.domain.policies.resolution import (
    resolve_audio_bit_depth,
    resolve_frame_rate,
    resolve_video_bit_depth,
)


def _video(**kw) -> StreamInfo:
    return StreamInfo(index=0, codec_type="video", **kw)


def _audio(**kw) -> StreamInfo:
    return StreamInfo(index=1, codec_type="audio", **kw)


# ---- video bit depth ----
def test_raw_sample_beats_pixel_format_and_disagreement_is_flagged():
    r = resolve_video_bit_depth(_video(pix_fmt="yuv420p10le", bits_per_raw_sample="12", profile="Main 10"))
    assert r.value == 12
    assert r.source == IndicatorSource.bits_per_raw_sample
    assert r.is_consistent is False
    assert r.profile_indicated_depth == 10
    assert r.pixel_format == "yuv420p10le"


def test_pixel_format_only():
    r = resolve_video_bit_depth(_video(pix_fmt="yuv420p10le"))
    assert (r.value, r.source, r.is_consistent) == (10, IndicatorSource.pixel_format, True)


def test_profile_applies_only_over_default():
    r = resolve_video_bit_depth(_video(profile="Main 10"))
    assert (r.value, r.source) == (10, IndicatorSource.codec_profile)

    r = resolve_video_bit_depth(_video(pix_fmt="yuv420p", profile="Main 10"))
    assert (r.value, r.source) == (8, IndicatorSource.pixel_format)
    # recorded even though it lost
    assert r.profile_indicated_depth == 10
    assert r.is_consistent is False


def test_video_default_when_nothing_parses():
    r = resolve_video_bit_depth(_video(pix_fmt="nv12", bits_per_raw_sample="bogus"))
    assert (r.value, r.source, r.is_consistent) == (8, IndicatorSource.default, True)
    assert r.indicators == ()


# ---- audio bit depth ----
def test_bits_per_sample_beats_sample_format():
    r = resolve_audio_bit_depth(_audio(sample_fmt="s16", bits_per_sample=24))
    assert (r.value, r.source) == (24, IndicatorSource.bits_per_sample)
    assert r.sample_format == "s16"
    assert r.is_consistent is False


def test_raw_sample_only_over_default():
    r = resolve_audio_bit_depth(_audio(bits_per_raw_sample="24"))
    assert (r.value, r.source) == (24, IndicatorSource.bits_per_raw_sample)

    r = resolve_audio_bit_depth(_audio(sample_fmt="s32", bits_per_raw_sample="24"))
    assert (r.value, r.source) == (32, IndicatorSource.sample_format)


def test_zero_bits_per_sample_is_no_indicator():
    r = resolve_audio_bit_depth(_audio(sample_fmt="fltp", bits_per_sample=0))
    assert (r.value, r.source, r.is_consistent) == (32, IndicatorSource.sample_format, True)


def test_audio_default():
    r = resolve_audio_bit_depth(_audio())
    assert (r.value, r.source) == (16, IndicatorSource.default)


# ---- frame rate ----
def test_average_frame_rate_wins():
    r = resolve_frame_rate(_video(avg_frame_rate="24000/1001", r_frame_rate="24/1"))
    assert math.isclose(r.value, 23.976, abs_tol=0.001)
    assert r.source == IndicatorSource.average_frame_rate
    assert r.is_consistent is True
    assert r.standard == "23.976p"
    assert r.category == "Cinema Frame Rate"
    assert r.is_variable_frame_rate is False


def test_gross_rate_disagreement_is_inconsistent():
    r = resolve_frame_rate(_video(r_frame_rate="60", avg_frame_rate="24"))
    assert r.value == 24.0
    assert r.is_consistent is False
    assert r.is_variable_frame_rate is True


def test_real_frame_rate_fallback():
    r = resolve_frame_rate(_video(r_frame_rate="25/1", avg_frame_rate="0/0"))
    assert (r.value, r.source) == (25.0, IndicatorSource.real_frame_rate)
    assert r.frame_duration_ms == 40.0


def test_unresolved_frame_rate():
    r = resolve_frame_rate(_video(r_frame_rate="N/A"))
    assert r.value == 0.0
    assert r.source == IndicatorSource.unresolved
    assert r.source_name == ""
    assert r.standard == "Unknown"
    assert r.is_consistent is False


def test_interlaced_standard_suffix():
    r = resolve_frame_rate(_video(avg_frame_rate="30000/1001", field_order="tt"))
    assert r.is_interlaced is True
    assert r.standard == "29.97i"


def test_resolution_is_repeatable():
    stream = _video(pix_fmt="yuv420p10le", bits_per_raw_sample="12", profile="Main 10")
    assert resolve_video_bit_depth(stream) == resolve_video_bit_depth(stream)


def test_oversized_numbers_fall_back_to_defaults():
    digits = "1" * 5000
    video = resolve_video_bit_depth(_video(bits_per_raw_sample=digits, profile=digits + " bit"))
    assert (video.value, video.source) == (8, IndicatorSource.default)

    audio = resolve_audio_bit_depth(_audio(sample_fmt="s" + digits))
    assert (audio.value, audio.source) == (16, IndicatorSource.default)
