# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# None of these require the shared secret.
# =============================================================================

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from lib.database import check_connection

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class LivenessResponse(BaseModel):
    """Liveness probe response."""
    message: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness probe.

    Returns whether the service process is alive.
    """
    return LivenessResponse(message=":)")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request):
    """
    Readiness check endpoint.

    Checks database connectivity; answers 503 when the store is unreachable.
    """
    healthy = await check_connection(request.app.state.engine)
    if healthy:
        return ReadinessResponse(status="ready", database="healthy")

    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="degraded", database="unhealthy").model_dump(),
    )
