"""
MangoNote Backend - Response Envelope Schemas
===============================================

What:  The `{success, data | error}` wrapper every endpoint answers with.
How:   `ApiResponse[T]` is a generic Pydantic model, so OpenAPI docs show the
       concrete payload type per route. `ErrorResponse` documents the failure
       shape built by ErrorHandler.create_error_response().
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful envelope: `{"success": true, "data": ...}`."""

    success: bool = True
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """
    Failure envelope.

    Client errors (400/404) carry only `success` and `error`. Server errors
    built by the error handler add `code`, `retryable` and `timestamp`.

    Example:
        {
            "success": false,
            "error": "An unexpected error occurred while processing your request. Please try again.",
            "code": "INTERNAL_ERROR",
            "retryable": false,
            "timestamp": "2024-01-15T12:00:00+00:00"
        }
    """

    success: bool = False
    error: str = Field(description="Human-readable, client-safe error description")
    code: Optional[str] = Field(default=None, description="Machine-readable error code")
    retryable: Optional[bool] = Field(default=None, description="Whether retrying may succeed")
    timestamp: Optional[datetime] = Field(default=None, description="When the error occurred (UTC)")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
