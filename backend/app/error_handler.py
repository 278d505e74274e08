"""
MangoNote Backend - Error Handling Helper
===========================================

What:  Logs failures with an operation context and builds client-safe error envelopes.
How:   `ErrorHandler.log_error()` writes one ERROR record per failure, tagged with
       the operation name ("note_fetch", "mindmap_get_by_note", ...) and the
       request id. `ErrorHandler.create_error_response()` converts any exception
       into `{success: false, error, code, retryable, timestamp}`.
Who:   Route helpers on unexpected failures; global exception handlers in main.py.

Security:
    Raw exception text never reaches the response body. Application errors
    supply their own `user_message`; anything else is matched against a short
    list of known failure classes and otherwise gets a generic message.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from app.config import settings
from app.exceptions import MangoNoteError
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred while processing your request. Please try again."

# (substring, message) pairs checked in order against the lowercased error text
_FRIENDLY_MESSAGES = (
    ("timed out", "The service is taking longer than expected. Please try again."),
    ("timeout", "The service is taking longer than expected. Please try again."),
    ("rate limit", "Too many requests. Please wait a moment and try again."),
    ("insufficient funds", "Service quota exceeded. Please try again later."),
    ("quota", "Service quota exceeded. Please try again later."),
    ("network", "Network connection error. Please check your connection and try again."),
    ("connection", "Network connection error. Please check your connection and try again."),
    ("json", "The service returned an unexpected response. Please try again."),
    ("parse", "The service returned an unexpected response. Please try again."),
)

_RETRYABLE_PATTERNS = (
    "timed out",
    "timeout",
    "network",
    "connection",
    "rate limit",
    "server error",
    "service unavailable",
)

# Metadata keys whose values are never written to logs verbatim
_REDACTED_KEYS = {"content", "body", "password", "token"}


class ErrorHandler:
    """Stateless collection of error logging and envelope helpers."""

    @staticmethod
    def get_user_friendly_message(error: BaseException) -> str:
        """Map an exception to a message that is safe to show a client."""
        if isinstance(error, MangoNoteError):
            return error.user_message

        text = str(error).lower()
        for needle, message in _FRIENDLY_MESSAGES:
            if needle in text:
                return message
        if isinstance(error, TimeoutError):
            return _FRIENDLY_MESSAGES[0][1]
        return GENERIC_ERROR_MESSAGE

    @staticmethod
    def is_retryable(error: BaseException) -> bool:
        """Whether repeating the same request has a chance of succeeding."""
        if isinstance(error, MangoNoteError):
            return error.retryable
        if isinstance(error, (TimeoutError, ConnectionError)):
            return True
        text = str(error).lower()
        return any(pattern in text for pattern in _RETRYABLE_PATTERNS)

    @staticmethod
    def error_code(error: BaseException) -> str:
        if isinstance(error, MangoNoteError):
            return error.code
        return "INTERNAL_ERROR"

    @staticmethod
    def sanitize_metadata(metadata: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Strip potentially sensitive values from log metadata.

        - `text` is replaced by its length ("[123 characters]")
        - content/body/password/token values become "[redacted]"
        - everything else is passed through unchanged
        """
        if metadata is None:
            return None
        sanitized: Dict[str, Any] = {}
        for key, value in metadata.items():
            if key == "text" and isinstance(value, str):
                sanitized[key] = f"[{len(value)} characters]"
            elif key in _REDACTED_KEYS and value is not None:
                sanitized[key] = "[redacted]"
            else:
                sanitized[key] = value
        return sanitized

    @classmethod
    def log_error(
        cls,
        error: BaseException,
        context: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log a failure with its operation context.

        Args:
            error:    The exception that was caught
            context:  Operation tag, e.g. "note_fetch"
            metadata: Identifiers and other debug values (sanitized before logging)
        """
        rid = request_id_var.get("")
        sanitized = cls.sanitize_metadata(metadata)
        logger.error(
            "[%s] [%s] %s: %s | code=%s metadata=%s",
            rid,
            context,
            type(error).__name__,
            str(error),
            cls.error_code(error),
            sanitized,
            # Stack traces only while developing; production logs stay compact
            exc_info=error if settings.is_development else None,
            extra={
                "request_id": rid,
                "error_context": context,
                "error_metadata": sanitized,
            },
        )

    @classmethod
    def create_error_response(cls, error: BaseException) -> Dict[str, Any]:
        """
        Build the standardized error envelope for API responses.

        Example:
            {
                "success": false,
                "error": "An unexpected error occurred while processing your request. ...",
                "code": "INTERNAL_ERROR",
                "retryable": false,
                "timestamp": "2024-01-15T12:00:00.000000+00:00"
            }
        """
        return {
            "success": False,
            "error": cls.get_user_friendly_message(error),
            "code": cls.error_code(error),
            "retryable": cls.is_retryable(error),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
