from __future__ import annotations
from pathlib import Path
from typing import Protocol

from qcprobe.domain.entities.probe import FFprobeResult
from qcprobe.domain.enums.probe_step import ProbeStep

class MediaProbePort(Protocol):
    """Runs one probe pass over a file. Raises ProbeError when the probe cannot run."""
    def probe(self, path: Path, step: ProbeStep) -> FFprobeResult: ...
