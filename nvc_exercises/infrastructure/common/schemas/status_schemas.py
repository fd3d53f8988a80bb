"""Schemas for the unauthenticated service status endpoints."""

from datetime import datetime

from pydantic import BaseModel


class ServiceInfoResponse(BaseModel):
    """Root endpoint response."""

    message: str
    status: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
