"""
Chirpy Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for each way a request can fail.
Why:   Services raise these; global handlers in main.py turn them into
       plain-text responses with the right status code, so no route carries
       its own try/except ladder.
How:   Each exception carries a user-facing message and an optional context
       dict that is logged but never returned to the client.

Exception Hierarchy:
    ChirpyError (base)
    ├── RequestDecodeError       → 400 Bad Request (malformed payload)
    ├── ValidationError          → 400 Bad Request
    │   └── ChirpTooLongError    → 400 Bad Request
    ├── ForbiddenError           → 403 Forbidden (dev guard)
    ├── PersistenceError         → 500 Internal Server Error
    └── TemplateReadError        → 500 Internal Server Error

Every error is terminal for its request. Nothing is retried.
"""

from typing import Any, Dict, Optional


class ChirpyError(Exception):
    """
    Base exception for all Chirpy application errors.

    Attributes:
        message:      User-facing error description (safe to return)
        context:      Additional debug info (logged, NOT returned)
        status_code:  HTTP status the global handler responds with
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class RequestDecodeError(ChirpyError):
    """
    Raised when the request payload cannot be decoded.

    When:  Body is not JSON, is not an object, or a field has the wrong type.
    HTTP:  400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ValidationError(ChirpyError):
    """
    Raised when decoded input breaks a business rule.

    HTTP:  400 Bad Request
    """

    status_code = 400

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


class ChirpTooLongError(ValidationError):
    """
    The chirp body exceeds the maximum length.

    The body is rejected outright; it is never truncated.
    """

    def __init__(self, length: int, max_length: int):
        super().__init__(
            message="Chirp is too long",
            field="body",
            context={"length": length, "max_length": max_length},
        )
        self.length = length
        self.max_length = max_length


class ForbiddenError(ChirpyError):
    """
    Raised when the dev guard refuses a destructive admin operation.

    HTTP:  403 Forbidden
    """

    status_code = 403

    def __init__(
        self,
        message: str = "Reset endpoint is only available in development environment",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PersistenceError(ChirpyError):
    """
    Raised when the user store fails.

    HTTP:  500 Internal Server Error

    Security Note:
        The message is a fixed, generic sentence chosen by the caller
        ("Failed to create user"). Driver errors, SQL and constraint names go
        into context and the server log only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class TemplateReadError(ChirpyError):
    """
    Raised when the admin metrics template cannot be read or rendered.

    HTTP:  500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
