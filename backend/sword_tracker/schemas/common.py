"""
Sword Tracker Backend: Shared Response Schemas
==============================================

What:  Error envelope, delete acknowledgement and health payload shared by
       every router.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from sword_tracker.schemas.base import CamelModel


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Invalid user data",
            "errors": [{"loc": ["body", "username"], "msg": "Field required", "type": "missing"}],
            "request_id": "3f2a9c1d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    errors: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Per-field validation errors (validation failures only)",
    )
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class SuccessResponse(BaseModel):
    """Body returned by every successful DELETE."""
    success: bool = True


class HealthResponse(CamelModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Configured storage backend: database, memory")
    database: str = Field(description="Database connectivity: connected, disconnected, not_used")
    uptime_seconds: float = Field(description="Seconds since service started")
