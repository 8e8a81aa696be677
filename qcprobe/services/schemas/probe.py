# qcprobe/services/schemas/probe.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ProbePayload(BaseModel):
    """ffprobe-shaped JSON as produced by `ffprobe -print_format json`."""
    streams: List[Dict[str, Any]] = Field(default_factory=list)
    format: Optional[Dict[str, Any]] = None
    packets: List[Dict[str, Any]] = Field(default_factory=list)
    error: Optional[Dict[str, Any]] = Field(None, examples=[{"code": -1094995529, "string": "Invalid data found"}])
    data_hashes: Dict[str, str] = Field(default_factory=dict, examples=[{"md5": "d41d8cd98f00b204e9800998ecf8427e"}])
