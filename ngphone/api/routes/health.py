"""GET /health: liveness plus phone-service readiness.

The service is ready once its prefix index is populated; an empty index
means every number would classify as unallocated.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from ngphone.api.deps import get_service
from ngphone.core.settings import get_settings
from ngphone.telco.service import PhoneService

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and phone-service readiness")
def health_check(service: PhoneService = Depends(get_service)) -> dict:
    settings = get_settings()
    stats = service.cache_stats()
    ready = stats.prefix_map_size > 0
    return {
        "status": "ok" if ready else "degraded",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.app_env,
        "phones": {
            "ready": ready,
            "prefix_map_size": stats.prefix_map_size,
            "cache_key": service.cache_key,
            "cache_size": stats.cache_size,
            "cache_capacity": stats.cache_capacity,
        },
    }
