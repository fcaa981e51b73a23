"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - /health answers 200 "OK" for every method, custom ones included (liveness)
    - GET /health/ready returns 503 if the app's settings fail is_valid() (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Liveness registered with add_route (plain Starlette route, no method set):
      APIRouter routes always carry an explicit method list
"""

import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from users_service.api.dependencies import get_app_settings
from users_service.config import Settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


async def health_check(request: Request) -> PlainTextResponse:
    """Basic liveness probe."""
    return PlainTextResponse("OK")


router.add_route("/health", health_check, include_in_schema=False)


@router.get("/health/ready")
async def readiness_check(settings: Settings = Depends(get_app_settings)):
    """Readiness probe — the configuration must be usable."""
    if not settings.is_valid():
        logger.warning("Readiness check failed: invalid configuration")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "invalid_config",
            },
        )
    return {
        "status": "ready",
        "service": settings.app_name,
        "checks": {"config": "valid"},
    }
