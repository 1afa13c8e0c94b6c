"""
Sweeper Health API Routes

Health check and status endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from sweeper import __version__
from sweeper.api.dependencies import get_engine, get_overlay, get_rule_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "sweeper-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(
    engine=Depends(get_engine),
    store=Depends(get_rule_store),
    overlay=Depends(get_overlay),
):
    """
    Readiness check with component details.

    The model overlay is optional: an unreachable model is reported but does
    not make the service unready.
    """
    checks = {
        "detection_engine": {
            "status": "ready",
            **engine.get_rule_summary(),
        },
        "custom_rules": {
            "status": "ready",
            "path": str(store.path),
            "url_patterns": len(store.rules.url_patterns),
            "keywords": len(store.rules.keywords),
        },
    }

    if overlay.is_enabled():
        status = await overlay.provider.check_availability()
        checks["model"] = {
            "status": status.value,
            "provider": overlay.provider.provider_name,
            "model": overlay.provider.model,
            "message": overlay.provider.status_message,
        }
    else:
        checks["model"] = {"status": "disabled"}

    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }
