"""Health check route."""

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime


@router.get("/healthcheck", response_model=HealthResponse)
async def healthcheck() -> HealthResponse:
    """Report that the service is running."""
    return HealthResponse(status="ok", timestamp=datetime.now(UTC))
