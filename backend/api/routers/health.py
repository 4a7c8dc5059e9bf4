"""
Health check API endpoints.

Routes: GET /health

Dependencies: backend.api.deps
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from backend.api.deps import get_service_cache
from backend.api.deps.dependencies import ServiceCache
from backend.core.exceptions import PolicyConfigError

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    policy_version: str | None = None


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(cache: ServiceCache = Depends(get_service_cache)):
    """Liveness check reporting the active prompt policy revision."""
    try:
        policy_version = cache.policy.version
    except PolicyConfigError as e:
        logger.error(f"{__name__}:health_check - Policy unavailable: {e}")
        return JSONResponse(
            status_code=503,
            content=HealthResponse(status="unhealthy", message=e.message).model_dump(),
        )

    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        policy_version=policy_version,
    )
