# qcprobe/domain/policies/resolution.py
"""
Attribute resolution: one fixed precedence order per attribute kind.

Later unconditional writes win over earlier ones; writes guarded by
"source is still default" have the lowest priority.

    video bit depth: default 8 < pixel_format < bits_per_raw_sample; codec_profile only over default
    audio bit depth: default 16 < sample_format < bits_per_sample; bits_per_raw_sample only over default
    frame rate:      average_frame_rate, else real_frame_rate, else unresolved (0)
"""
from __future__ import annotations

from qcprobe.domain.dataclasses.attributes import AudioBitDepth, VideoBitDepth, VideoFrameRate
from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.indicator_source import IndicatorSource
from qcprobe.domain.policies.consistency import exact_match_consistent, frame_rate_consistent
from qcprobe.domain.policies.frame_rates import (
    categorize_frame_rate,
    frame_rate_category,
    is_interlaced,
    is_variable_frame_rate,
)
from qcprobe.domain.policies.indicators import (
    audio_bit_depth_indicators,
    frame_rate_indicators,
    indicator_value,
    video_bit_depth_indicators,
)

DEFAULT_VIDEO_BIT_DEPTH = 8
DEFAULT_AUDIO_BIT_DEPTH = 16


def resolve_video_bit_depth(stream: StreamInfo) -> VideoBitDepth:
    indicators = video_bit_depth_indicators(stream)
    value, source = DEFAULT_VIDEO_BIT_DEPTH, IndicatorSource.default
    pixel_format = None

    pix_depth = indicator_value(indicators, IndicatorSource.pixel_format)
    if pix_depth:
        value, source = pix_depth, IndicatorSource.pixel_format
        pixel_format = stream.pix_fmt

    raw_depth = indicator_value(indicators, IndicatorSource.bits_per_raw_sample)
    if raw_depth:
        value, source = raw_depth, IndicatorSource.bits_per_raw_sample

    profile_depth = indicator_value(indicators, IndicatorSource.codec_profile)
    if profile_depth and source == IndicatorSource.default:
        value, source = profile_depth, IndicatorSource.codec_profile

    return VideoBitDepth(
        value=int(value),
        source=source,
        is_consistent=exact_match_consistent(indicators),
        indicators=indicators,
        pixel_format=pixel_format,
        profile_indicated_depth=int(profile_depth),
    )


def resolve_audio_bit_depth(stream: StreamInfo) -> AudioBitDepth:
    indicators = audio_bit_depth_indicators(stream)
    value, source = DEFAULT_AUDIO_BIT_DEPTH, IndicatorSource.default
    sample_format = None

    fmt_depth = indicator_value(indicators, IndicatorSource.sample_format)
    if fmt_depth:
        value, source = fmt_depth, IndicatorSource.sample_format
        sample_format = stream.sample_fmt

    explicit = indicator_value(indicators, IndicatorSource.bits_per_sample)
    if explicit:
        value, source = explicit, IndicatorSource.bits_per_sample

    raw_depth = indicator_value(indicators, IndicatorSource.bits_per_raw_sample)
    if raw_depth and source == IndicatorSource.default:
        value, source = raw_depth, IndicatorSource.bits_per_raw_sample

    return AudioBitDepth(
        value=int(value),
        source=source,
        is_consistent=exact_match_consistent(indicators),
        indicators=indicators,
        sample_format=sample_format,
    )


def resolve_frame_rate(stream: StreamInfo) -> VideoFrameRate:
    indicators = frame_rate_indicators(stream)
    real = float(indicator_value(indicators, IndicatorSource.real_frame_rate))
    average = float(indicator_value(indicators, IndicatorSource.average_frame_rate))

    if average > 0:
        effective, source = average, IndicatorSource.average_frame_rate
    elif real > 0:
        effective, source = real, IndicatorSource.real_frame_rate
    else:
        effective, source = 0.0, IndicatorSource.unresolved

    interlaced = is_interlaced(stream.field_order)
    return VideoFrameRate(
        value=effective,
        source=source,
        is_consistent=frame_rate_consistent(real, average, effective),
        indicators=indicators,
        real_frame_rate=real,
        average_frame_rate=average,
        is_variable_frame_rate=is_variable_frame_rate(real, average),
        is_interlaced=interlaced,
        standard=categorize_frame_rate(effective, interlaced),
        category=frame_rate_category(effective),
        frame_duration_ms=(1000.0 / effective) if effective > 0 else 0.0,
    )
