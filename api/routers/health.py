"""Health check endpoints."""

from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings
from api.dependencies import get_repository

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic liveness check.

    Returns 200 if the service is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat() + "Z"
    }


@router.get("/health/ready")
def readiness_check(
    settings: Settings = Depends(get_settings),
    repo=Depends(get_repository),
) -> Dict[str, Any]:
    """
    Readiness check - verifies the store answers a trivial query.
    """
    checks = {
        "database": {
            "status": "ok",
            "backend": "supabase" if settings.supabase_enabled else "memory",
        },
    }

    try:
        repo.list_categories()
    except Exception as e:
        checks["database"].update({"status": "error", "message": str(e)})

    all_ok = all(c.get("status") == "ok" for c in checks.values())

    return {
        "status": "ready" if all_ok else "degraded",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "version": settings.app_version,
        "checks": checks
    }


@router.get("/health/info")
async def service_info(
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """Return service information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": "development" if settings.debug else "production",
        "pricing": {
            "insurance_rate": str(settings.insurance_rate),
            "tax_rate": str(settings.tax_rate),
        },
    }
