"""
MangoNote Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios the API knows about.
How:   Each exception carries an internal message, a machine-readable code,
       a client-safe user message, a retryable flag and an optional context dict.
       The error handler (app/error_handler.py) turns them into envelopes;
       global handlers in main.py map them to HTTP status codes.
Who:   Raised by services; caught by route helpers and global handlers.

Exception Hierarchy:
    MangoNoteError (base)        -> 500 Internal Server Error
    ├── NotFoundError            -> 404 Not Found
    └── DatabaseError            -> 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class MangoNoteError(Exception):
    """
    Base exception for all MangoNote application errors.

    Attributes:
        message:      Internal description (logged, never returned to the client)
        code:         Machine-readable error code returned in the envelope
        user_message: Client-facing description, safe to return
        retryable:    Whether the client may retry the same request
        context:      Additional debug info (logged but NOT returned to client)
    """

    status_code = 500
    default_code = "INTERNAL_ERROR"
    default_user_message = "An unexpected error occurred. Please try again."

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        code: Optional[str] = None,
        user_message: Optional[str] = None,
        retryable: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.user_message = user_message or self.default_user_message
        self.retryable = retryable
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(MangoNoteError):
    """
    Raised when a requested resource does not exist.

    HTTP:    404 Not Found
    Services return None for missing rows; this exception is for code paths
    that have no Optional return (and for the global handler backstop).
    """

    status_code = 404
    default_code = "NOT_FOUND"

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
        super().__init__(
            message=message,
            user_message=f"{resource.capitalize()} not found",
            context=ctx,
        )


class DatabaseError(MangoNoteError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The user message is always generic. Detailed error info (SQL, constraint
        names, driver messages) is logged server-side only.
    """

    default_code = "DATABASE_ERROR"
    default_user_message = "A database error occurred. Please try again later."

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        # Connection drops and deadlocks are usually transient
        super().__init__(message=message, retryable=True, context=context)
