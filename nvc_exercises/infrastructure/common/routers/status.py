"""Service status routes. These need no API key."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status

from nvc_exercises.config import Settings, get_settings
from nvc_exercises.infrastructure.common.schemas import HealthResponse, ServiceInfoResponse

router = APIRouter(tags=["status"])


@router.get("/", response_model=ServiceInfoResponse, status_code=status.HTTP_200_OK)
def service_info() -> ServiceInfoResponse:
    """Identify the service."""
    return ServiceInfoResponse(message="NVC Exercises API v1", status="running")


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
def health_check(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
    """Report liveness with the running version."""
    return HealthResponse(status="healthy", timestamp=datetime.now(UTC), version=settings.VERSION)
