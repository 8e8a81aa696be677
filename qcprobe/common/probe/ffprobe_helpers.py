# qcprobe/common/probe/ffprobe_helpers.py
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from qcprobe.domain.entities.probe import (
    FFprobeResult,
    FormatInfo,
    PacketInfo,
    ProbeErrorInfo,
    StreamInfo,
)


def parse_ffprobe(data: Dict[str, Any] | None) -> FFprobeResult:
    """
    Map ffprobe JSON (-show_streams -show_format -show_packets -show_error)
    into immutable records. Safe to call in unit tests with fixture JSON.
    Missing or unparsable fields become None; nothing here raises for bad values.
    """
    data = data or {}
    streams = [s for s in (data.get("streams") or []) if isinstance(s, dict)]
    packets = [p for p in (data.get("packets") or []) if isinstance(p, dict)]
    fmt = data.get("format")
    err = data.get("error")

    return FFprobeResult(
        streams=tuple(parse_stream(s, default_index=i) for i, s in enumerate(streams)),
        format=parse_format(fmt) if isinstance(fmt, dict) else None,
        packets=tuple(parse_packet(p) for p in packets),
        error=parse_error(err) if isinstance(err, dict) else None,
        data_hashes=_str_mapping(data.get("data_hashes")),
    )


def parse_stream(s: Dict[str, Any], default_index: int = 0) -> StreamInfo:
    index = _parse_int(s.get("index"))
    return StreamInfo(
        index=index if index is not None else default_index,
        codec_type=str(s.get("codec_type") or "").lower(),
        codec_name=_parse_str(s.get("codec_name")),
        profile=_parse_str(s.get("profile")),
        pix_fmt=_parse_str(s.get("pix_fmt")),
        sample_fmt=_parse_str(s.get("sample_fmt")),
        bits_per_sample=_parse_int(s.get("bits_per_sample")),
        bits_per_raw_sample=_parse_str(s.get("bits_per_raw_sample")),
        r_frame_rate=_parse_str(s.get("r_frame_rate")),
        avg_frame_rate=_parse_str(s.get("avg_frame_rate")),
        field_order=_parse_str(s.get("field_order")),
        color_transfer=_parse_str(s.get("color_transfer")),
        color_primaries=_parse_str(s.get("color_primaries")),
        width=_parse_int(s.get("width")),
        height=_parse_int(s.get("height")),
    )


def parse_format(fmt: Dict[str, Any]) -> FormatInfo:
    return FormatInfo(
        format_name=str(fmt.get("format_name") or ""),
        format_long_name=_parse_str(fmt.get("format_long_name")),
        filename=_parse_str(fmt.get("filename")),
        duration=_parse_str(fmt.get("duration")),
        size=_parse_str(fmt.get("size")),
        bit_rate=_parse_str(fmt.get("bit_rate")),
        probe_score=_parse_int(fmt.get("probe_score")) or 0,
        nb_streams=_parse_int(fmt.get("nb_streams")) or 0,
        nb_programs=_parse_int(fmt.get("nb_programs")) or 0,
        tags=_str_mapping(fmt.get("tags")),
    )


def parse_packet(p: Dict[str, Any]) -> PacketInfo:
    return PacketInfo(
        pts=_parse_int(p.get("pts")),
        dts=_parse_int(p.get("dts")),
        stream_index=_parse_int(p.get("stream_index")),
    )


def parse_error(e: Dict[str, Any]) -> ProbeErrorInfo:
    # ffprobe names the message field "string"
    return ProbeErrorInfo(
        code=_parse_int(e.get("code")) or 0,
        message=str(e.get("string") or e.get("message") or ""),
    )


# ---- tiny parse helpers -------------------------------------------------------
def _parse_str(x) -> Optional[str]:
    if x is None:
        return None
    s = str(x)
    return s if s else None


def _parse_int(x) -> Optional[int]:
    if x is None or isinstance(x, bool):
        return None
    try:
        return int(x)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return None


def _str_mapping(obj) -> Mapping[str, str]:
    if not isinstance(obj, dict):
        return MappingProxyType({})
    return MappingProxyType({str(k): str(v) for k, v in obj.items() if v is not None})
