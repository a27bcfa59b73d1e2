"""
Health check API endpoints.

Routes: GET /health (plain text, for load balancers), GET /api/v1/health

Dependencies: fastapi
System role: Health check HTTP API
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from lastnightpix.models.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness probe."""
    return "ok"


v1_router = APIRouter(prefix="/health", tags=["health"])


@v1_router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")
