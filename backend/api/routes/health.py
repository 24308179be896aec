"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class RootResponse(BaseModel):
    """Service banner."""

    message: str


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str


@router.get("/", response_model=RootResponse)
async def root(request: Request) -> RootResponse:
    """Confirm the API is reachable."""
    return RootResponse(message=request.app.title)


@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 with the current server time (ISO 8601, UTC) if the API is
    running.
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
