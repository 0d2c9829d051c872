"""
Health check endpoints.

Provides endpoints for monitoring application health.
"""

from datetime import datetime
from fastapi import APIRouter
from pydantic import BaseModel

from shared.clock import utcnow
from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    version: str
    timestamp: datetime


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    settings = get_settings()
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        timestamp=utcnow(),
    )
