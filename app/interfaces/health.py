"""
Health check router for the articles service.

Liveness endpoint for orchestrators and load balancers. It does not touch
the database and is not rate limited, so health checks never see a 429.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.articles.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
