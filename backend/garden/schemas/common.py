"""
Community Garden Backend — Shared Response Schemas
===================================================

What:  JSON bodies for error responses and the health check.
Why:   The plot pages are HTML, but failures and probes are consumed by
       tooling that expects a consistent machine-readable shape.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body returned by the global exception handlers.

    Example:
        {
            "error": "not_found",
            "message": "Plot 42 does not exist",
            "request_id": "1f3a9c0e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
