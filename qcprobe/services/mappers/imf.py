# qcprobe/services/mappers/imf.py
from __future__ import annotations

from qcprobe.domain.dataclasses.analysis import CPLAnalysis
from qcprobe.services.schemas.imf import CPLAnalysisRead


def to_cpl_read(analysis: CPLAnalysis) -> CPLAnalysisRead:
    """Segments/tracks/resources are frozen dataclasses; pydantic reads their attributes."""
    return CPLAnalysisRead.model_validate(analysis)
