# qcprobe/services/api/routers/imf.py
from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, status

from qcprobe.common.logging import get_logger
from qcprobe.common.path.safe import safe_join
from qcprobe.common.settings import Settings, get_settings
from qcprobe.domain.errors import CompositionParseError
from qcprobe.services.api.deps import get_cpl_analyzer
from qcprobe.services.imf.cpl import CPLAnalyzer
from qcprobe.services.mappers.imf import to_cpl_read
from qcprobe.services.schemas.imf import CPLAnalysisRead, CPLRequest

logger = get_logger()
cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/imf", tags=["imf"])


@router.post("/cpl", response_model=CPLAnalysisRead)
def analyze_cpl(
    req: CPLRequest,
    settings: Settings = Depends(get_settings),
    analyzer: CPLAnalyzer = Depends(get_cpl_analyzer),
) -> CPLAnalysisRead:
    try:
        package_dir = safe_join(settings.imf.package_root, req.package)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not package_dir.is_dir():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"package not found: {req.package}")

    try:
        analysis = analyzer.analyze(package_dir)
    except CompositionParseError as e:
        logger.warning("CPL parse failed for %s: %s", package_dir, e)
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return to_cpl_read(analysis)
