"""
Index and health check router.

``/`` answers with a plain-text liveness string, ``/health`` with the
application status and version. No business logic.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from userapi.core.config import settings
from userapi.interfaces.users.schemas import HealthResponse

router = APIRouter(tags=["health"])

INDEX_MESSAGE = "API is running"


@router.get("/", response_class=PlainTextResponse, summary="Liveness text")
def index() -> str:
    return INDEX_MESSAGE


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)
