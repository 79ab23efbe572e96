"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and the
configured users storage backend.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.users.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and users backend.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        users_backend=settings.user_repository_backend,
    )
