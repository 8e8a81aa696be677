# qcprobe/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


def _empty_tags() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class StreamInfo:
    """
    One elementary stream as reported by the probing tool.
    `None` means the field was absent; it is never used to encode "zero".
    """
    index: int
    codec_type: str
    codec_name: Optional[str] = None
    profile: Optional[str] = None
    pix_fmt: Optional[str] = None
    sample_fmt: Optional[str] = None
    bits_per_sample: Optional[int] = None
    bits_per_raw_sample: Optional[str] = None
    r_frame_rate: Optional[str] = None
    avg_frame_rate: Optional[str] = None
    field_order: Optional[str] = None
    color_transfer: Optional[str] = None
    color_primaries: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class FormatInfo:
    """Container-level record."""
    format_name: str = ""
    format_long_name: Optional[str] = None
    filename: Optional[str] = None
    duration: Optional[str] = None
    size: Optional[str] = None
    bit_rate: Optional[str] = None
    probe_score: int = 0
    nb_streams: int = 0
    nb_programs: int = 0
    tags: Mapping[str, str] = field(default_factory=_empty_tags)


@dataclass(frozen=True)
class PacketInfo:
    pts: Optional[int] = None
    dts: Optional[int] = None
    stream_index: Optional[int] = None


@dataclass(frozen=True)
class ProbeErrorInfo:
    """Error block emitted by the probing tool (`-show_error`)."""
    code: int
    message: str = ""


@dataclass(frozen=True)
class FFprobeResult:
    streams: Tuple[StreamInfo, ...] = ()
    format: Optional[FormatInfo] = None
    packets: Tuple[PacketInfo, ...] = ()
    error: Optional[ProbeErrorInfo] = None
    data_hashes: Mapping[str, str] = field(default_factory=_empty_tags)
