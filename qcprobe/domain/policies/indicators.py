# qcprobe/domain/policies/indicators.py
"""
Candidate extraction: turn the metadata fields of a stream record into typed
indicators for one attribute kind.

Every helper returns 0 for "no indicator". Unparsable or absent fields are
skipped silently; nothing in here raises for bad input.
"""
from __future__ import annotations

import math
import re
from types import MappingProxyType
from typing import Optional, Tuple

from qcprobe.domain.dataclasses.attributes import Indicator
from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.indicator_source import IndicatorSource

PIXEL_FORMAT_BIT_DEPTHS = MappingProxyType({
    # 8-bit
    "yuv420p": 8, "yuv422p": 8, "yuv444p": 8,
    "yuvj420p": 8, "yuvj422p": 8, "yuvj444p": 8,
    "rgb24": 8, "bgr24": 8, "rgba": 8, "bgra": 8,
    # 10-bit
    "yuv420p10le": 10, "yuv420p10be": 10, "yuv422p10le": 10, "yuv422p10be": 10,
    "yuv444p10le": 10, "yuv444p10be": 10,
    "yuv420p10": 10, "yuv422p10": 10, "yuv444p10": 10,
    "p010le": 10, "p010be": 10,
    # 12-bit
    "yuv420p12le": 12, "yuv420p12be": 12, "yuv422p12le": 12, "yuv422p12be": 12,
    "yuv444p12le": 12, "yuv444p12be": 12,
    "yuv420p12": 12, "yuv422p12": 12, "yuv444p12": 12,
    # 16-bit
    "yuv420p16le": 16, "yuv420p16be": 16, "yuv422p16le": 16, "yuv422p16be": 16,
    "yuv444p16le": 16, "yuv444p16be": 16,
    "yuv420p16": 16, "yuv422p16": 16, "yuv444p16": 16,
    "rgb48le": 16, "rgb48be": 16, "rgba64le": 16, "rgba64be": 16,
})

SAMPLE_FORMAT_BIT_DEPTHS = MappingProxyType({
    "u8": 8, "u8p": 8,
    "s16": 16, "s16p": 16,
    "s32": 32, "s32p": 32,
    "s64": 64, "s64p": 64,
    "flt": 32, "fltp": 32,
    "dbl": 64, "dblp": 64,
})

# Tried in order when a pixel format is not in the table; first hit wins.
PIXEL_FORMAT_FALLBACKS: Tuple[re.Pattern[str], ...] = tuple(
    re.compile(p) for p in (r"p(\d+)le$", r"p(\d+)be$", r"(\d+)bit", r"(\d+)le$", r"(\d+)be$")
)
SAMPLE_FORMAT_FALLBACK = re.compile(r"s(\d+)p?$")
PROFILE_BIT_PATTERN = re.compile(r"(\d+)\s*bit")

# (substrings, depth) checked in order against the lower-cased profile
PROFILE_HINTS: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("main 10", "main10"), 10),      # HEVC
    (("main 12", "main12"), 12),      # HEVC RExt
    (("professional",), 12),          # AV1
    (("profile 2", "profile 3"), 10), # VP9
)

_UNSET_RATES = frozenset({"", "N/A", "0/0"})


def _match_depth(pattern: re.Pattern[str], text: str) -> int:
    m = pattern.search(text)
    if not m:
        return 0
    try:
        depth = int(m.group(1))
    except ValueError:
        return 0
    return depth if depth > 0 else 0


def bit_depth_from_pixel_format(pix_fmt: Optional[str]) -> int:
    if not pix_fmt:
        return 0
    key = pix_fmt.lower()
    if key in PIXEL_FORMAT_BIT_DEPTHS:
        return PIXEL_FORMAT_BIT_DEPTHS[key]
    for pattern in PIXEL_FORMAT_FALLBACKS:
        depth = _match_depth(pattern, key)
        if depth:
            return depth
    return 0


def bit_depth_from_sample_format(sample_fmt: Optional[str]) -> int:
    if not sample_fmt:
        return 0
    key = sample_fmt.lower()
    if key in SAMPLE_FORMAT_BIT_DEPTHS:
        return SAMPLE_FORMAT_BIT_DEPTHS[key]
    return _match_depth(SAMPLE_FORMAT_FALLBACK, key)


def bit_depth_from_profile(profile: Optional[str]) -> int:
    if not profile:
        return 0
    text = profile.lower()
    for needles, depth in PROFILE_HINTS:
        if any(n in text for n in needles):
            return depth
    return _match_depth(PROFILE_BIT_PATTERN, text)


def parse_positive_int(raw: Optional[str | int]) -> int:
    """Strict integer parse of a numeric metadata field; 0 when absent, bad or <= 0."""
    if raw is None or isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw > 0 else 0
    s = str(raw)
    if not re.fullmatch(r"[+-]?\d+", s):
        return 0
    try:
        value = int(s)
    except ValueError:
        return 0
    return value if value > 0 else 0


def parse_frame_rate(raw: Optional[str]) -> float:
    """
    Parse "num/den" or a bare decimal into fps.
    "N/A", "0/0", empty, division by zero and junk all give 0.0.
    """
    if raw is None:
        return 0.0
    s = str(raw)
    if s in _UNSET_RATES:
        return 0.0

    value = 0.0
    parts = s.split("/")
    if len(parts) == 2:
        try:
            num, den = float(parts[0]), float(parts[1])
        except ValueError:
            num, den = 0.0, 0.0
        if den != 0:
            value = num / den
    if not value:
        try:
            value = float(s)
        except ValueError:
            value = 0.0

    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value


# ---------------------------------------------------------------------------
# Per-attribute collectors
# ---------------------------------------------------------------------------
def _collect(*candidates: Tuple[int | float, IndicatorSource]) -> Tuple[Indicator, ...]:
    return tuple(Indicator(value=v, origin=o) for v, o in candidates if v > 0)


def video_bit_depth_indicators(stream: StreamInfo) -> Tuple[Indicator, ...]:
    return _collect(
        (parse_positive_int(stream.bits_per_raw_sample), IndicatorSource.bits_per_raw_sample),
        (bit_depth_from_pixel_format(stream.pix_fmt), IndicatorSource.pixel_format),
        (bit_depth_from_profile(stream.profile), IndicatorSource.codec_profile),
    )


def audio_bit_depth_indicators(stream: StreamInfo) -> Tuple[Indicator, ...]:
    return _collect(
        (parse_positive_int(stream.bits_per_sample), IndicatorSource.bits_per_sample),
        (parse_positive_int(stream.bits_per_raw_sample), IndicatorSource.bits_per_raw_sample),
        (bit_depth_from_sample_format(stream.sample_fmt), IndicatorSource.sample_format),
    )


def frame_rate_indicators(stream: StreamInfo) -> Tuple[Indicator, ...]:
    return _collect(
        (parse_frame_rate(stream.r_frame_rate), IndicatorSource.real_frame_rate),
        (parse_frame_rate(stream.avg_frame_rate), IndicatorSource.average_frame_rate),
    )


def indicator_value(indicators: Tuple[Indicator, ...], origin: IndicatorSource) -> int | float:
    """Value of the indicator with the given origin, or 0 if none was collected."""
    return next((i.value for i in indicators if i.origin == origin), 0)
