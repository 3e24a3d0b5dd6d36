"""
Sword Tracker Backend: Exception Hierarchy
==========================================

What:  Application-specific exceptions, one per failure kind.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers registered in main.py turn them into JSON error
       responses with the matching HTTP status code.
Who:   Raised by routes, storage implementations and services.

Exception Hierarchy:
    SwordTrackerError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── NotFoundError            → 404 Not Found
    ├── AnalysisError            → 500 Internal Server Error
    ├── FileStorageError         → 500 Internal Server Error
    ├── DatabaseError            → 500 Internal Server Error
    └── StorageUnavailableError  → 503 Service Unavailable

Anything that is not a SwordTrackerError is treated as an internal error
(500 with a generic message).
"""

from typing import Any, Dict, List, Optional


class SwordTrackerError(Exception):
    """
    Base exception for all Sword Tracker application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SwordTrackerError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    `errors` is the structured per-field list returned to the client. It is
    only populated for schema violations (pydantic errors); business-rule
    rejections such as an unknown ELO period carry a message only.

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid user data",
            "errors": [{"loc": ["body", "username"], "msg": "Field required", ...}]
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field
        self.errors = errors


class NotFoundError(SwordTrackerError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found

    Storage returns None (or False for deletes) for missing records; routes
    convert that into this exception. The message reads "<Resource> not found".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class AnalysisError(SwordTrackerError):
    """
    Raised when the position analyzer fails on a position it accepted.

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "Analysis error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(SwordTrackerError):
    """
    Raised when a file system operation fails (archive unreadable, permission
    denied, I/O error).

    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(SwordTrackerError):
    """
    Raised when a database operation fails unexpectedly (constraint violation,
    bad query, serialization failure).

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; SQL and constraint
    names go to the server log through `context` only.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageUnavailableError(SwordTrackerError):
    """
    Raised when the storage backend cannot be reached at all (connection
    refused, database restarting, pool exhausted).

    HTTP:    503 Service Unavailable

    Distinct from DatabaseError so clients and load balancers can tell "try
    again later" apart from "this request broke something".
    """

    def __init__(
        self,
        message: str = "Storage is temporarily unavailable. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
