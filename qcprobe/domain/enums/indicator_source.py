# qcprobe/domain/enums/indicator_source.py
from __future__ import annotations

from enum import StrEnum


class IndicatorSource(StrEnum):
    """Metadata field an attribute value was derived from (its provenance)."""
    default = "default"
    # bit depth
    pixel_format = "pixel_format"
    bits_per_raw_sample = "bits_per_raw_sample"
    codec_profile = "codec_profile"
    sample_format = "sample_format"
    bits_per_sample = "bits_per_sample"
    # frame rate
    real_frame_rate = "real_frame_rate"
    average_frame_rate = "average_frame_rate"
    # nothing usable found
    unresolved = ""
