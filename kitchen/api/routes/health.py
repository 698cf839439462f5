"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until both stores are attached to the app (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness reads app.state directly: a missing store is a 503, not a 500
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from kitchen.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe — both stores constructed and attached."""
    shopping_list = getattr(request.app.state, "shopping_list", None)
    recipes = getattr(request.app.state, "recipes", None)
    if shopping_list is None or recipes is None:
        logger.warning("Readiness check failed: stores not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "stores_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {
            "shopping_list": {"records": len(shopping_list)},
            "recipes": {"records": len(recipes)},
        },
    }
