# qcprobe/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from qcprobe.common.settings import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(settings: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "app": settings.app_name,
        "env": settings.app_env,
        "api_prefix": settings.api.prefix,
        "features": settings.features.model_dump(),
    }
