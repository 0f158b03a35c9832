"""
IdeaBoard Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a user-facing message and an optional context
       dict. Context is logged server-side and never returned to the client.
Who:   Raised by repositories, services and the database layer; caught by
       routes (per-endpoint fallbacks) or by the global handlers in main.py.

Exception Hierarchy:
    IdeaBoardError (base)           → 500 Internal Server Error
    ├── ValidationError             → 400 Bad Request
    ├── NotFoundError               → routes answer 204 No Content
    ├── DatabaseError               → 500 Internal Server Error
    └── PoolExhaustedError          → 500 Internal Server Error (pool_exhausted)
"""

from typing import Any, Dict, Optional


class IdeaBoardError(Exception):
    """
    Base exception for all IdeaBoard application errors.

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


class ValidationError(IdeaBoardError):
    """
    Raised when client input fails validation.

    When:    POST /ideas without a message.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "An idea requires a non-empty message",
            "details": {"field": "message"},
            "request_id": "a1b2c3d4"
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(IdeaBoardError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; the service layer converts that
    None into this exception so the route can pick the response status.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(IdeaBoardError):
    """
    Raised when a database statement fails.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error (when not handled by the route)

    The message returned to the client is always generic. The failing
    operation and driver error type are kept in `context` for the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PoolExhaustedError(IdeaBoardError):
    """
    Raised when no pooled connection could be checked out in time.

    When:    Every connection is busy for longer than `db_pool_timeout`.
    HTTP:    500 Internal Server Error with error code `pool_exhausted`
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "No database connection is available. Please try again shortly."
        ctx = context or {}
        if timeout is not None:
            ctx["pool_timeout"] = timeout
        super().__init__(message=message, context=ctx)
        self.timeout = timeout
