# qcprobe/domain/policies/container_families.py
from __future__ import annotations

from types import MappingProxyType

from qcprobe.common.strings.splitters import first_token
from qcprobe.domain.dataclasses.analysis import ContainerInfo

# First token of the probe's format name -> container family
CONTAINER_FAMILIES = MappingProxyType({
    "mp4": "MP4", "mov": "QuickTime", "qt": "QuickTime", "avi": "AVI",
    "mkv": "Matroska", "matroska": "Matroska", "webm": "WebM",
    "flv": "FLV", "f4v": "FLV",
    "ts": "MPEG-TS", "mpegts": "MPEG-TS", "m2ts": "MPEG-TS", "mts": "MPEG-TS",
    "ps": "MPEG-PS", "mpegps": "MPEG-PS",
    "wmv": "ASF/WMV", "asf": "ASF/WMV",
    "3gp": "3GPP", "3g2": "3GPP2",
    "ogg": "Ogg", "ogv": "Ogg",
    "mxf": "MXF", "gxf": "GXF",
    "rm": "RealMedia", "rmvb": "RealMedia",
    "nut": "NUT", "yuv4mpegpipe": "Y4M", "rawvideo": "Raw Video",
    "wav": "WAV", "mp3": "MP3", "aac": "AAC", "flac": "FLAC",
    "oga": "Ogg Audio", "m4a": "M4A", "wma": "WMA",
})

CONTAINER_INFO = MappingProxyType({
    "MP4": ContainerInfo(
        description="MPEG-4 Part 14 container format", mime_type="video/mp4",
        extensions=(".mp4", ".m4v", ".m4a"), standardized_by="ISO/IEC 14496-14",
        year_introduced=2001, is_open_standard=True,
    ),
    "QuickTime": ContainerInfo(
        description="Apple QuickTime movie format", mime_type="video/quicktime",
        extensions=(".mov", ".qt"), standardized_by="Apple Inc.",
        year_introduced=1991, is_open_standard=False,
    ),
    "Matroska": ContainerInfo(
        description="Open-source multimedia container", mime_type="video/x-matroska",
        extensions=(".mkv", ".mka", ".mks"), standardized_by="Matroska.org",
        year_introduced=2002, is_open_standard=True,
    ),
    "WebM": ContainerInfo(
        description="Google WebM format for web", mime_type="video/webm",
        extensions=(".webm",), standardized_by="Google",
        year_introduced=2010, is_open_standard=True,
    ),
    "AVI": ContainerInfo(
        description="Audio Video Interleave", mime_type="video/x-msvideo",
        extensions=(".avi",), standardized_by="Microsoft",
        year_introduced=1992, is_open_standard=False,
    ),
    "MPEG-TS": ContainerInfo(
        description="MPEG Transport Stream", mime_type="video/mp2t",
        extensions=(".ts", ".m2ts", ".mts"), standardized_by="ISO/IEC 13818-1",
        year_introduced=1995, is_open_standard=True,
    ),
    "FLV": ContainerInfo(
        description="Flash Video format", mime_type="video/x-flv",
        extensions=(".flv", ".f4v"), standardized_by="Adobe",
        year_introduced=2003, is_open_standard=False,
    ),
    "MXF": ContainerInfo(
        description="Material Exchange Format", mime_type="application/mxf",
        extensions=(".mxf",), standardized_by="SMPTE 377M",
        year_introduced=2004, is_open_standard=True,
    ),
})

# Families not listed here are treated as not streaming friendly
STREAMING_FRIENDLY = MappingProxyType({
    "MP4": True,
    "WebM": True,
    "MPEG-TS": True,
    "FLV": True,
    "Matroska": True,
    "QuickTime": False,  # moov atom placement
    "AVI": False,        # index at end
    "MXF": False,
})

LEGACY_FAMILIES = frozenset({"FLV", "RealMedia", "AVI"})


def container_family(format_name: str) -> str:
    """Family for the first comma-separated token; unknown names pass through."""
    return CONTAINER_FAMILIES.get(first_token(format_name), format_name)


def container_info(family: str) -> ContainerInfo:
    return CONTAINER_INFO.get(family) or ContainerInfo(description=f"{family} container format")


def is_streaming_friendly(family: str) -> bool:
    return STREAMING_FRIENDLY.get(family, False)
