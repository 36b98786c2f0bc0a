"""Application errors

Several internal causes are deliberately collapsed into one public error at
the HTTP boundary. The cause survives in ``reason`` for the server log only.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Error taxonomy"""
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    INVALID_TOKEN = "invalid_token"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND_OR_FORBIDDEN = "not_found_or_forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class AppError(Exception):
    """Base application error with a public message and a private reason."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, reason: Optional[str] = None):
        self.message = message or self.default_message
        self.reason = reason
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, reason={self.reason!r})"


class ConflictError(AppError):
    """Duplicate unique field."""
    kind = ErrorKind.CONFLICT
    status_code = 409
    default_message = "Resource already exists"


class UnauthorizedError(AppError):
    """Missing or invalid credentials or token."""
    kind = ErrorKind.UNAUTHORIZED
    status_code = 401
    default_message = "Unauthorized"


class InvalidTokenError(AppError):
    """Token failed verification (expired, malformed, forged, bad payload)."""
    kind = ErrorKind.INVALID_TOKEN
    status_code = 401
    default_message = "Invalid or expired token"


class ValidationFailedError(AppError):
    """Malformed input, with optional per-field detail."""
    kind = ErrorKind.VALIDATION_FAILED
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None, reason: Optional[str] = None):
        super().__init__(message, reason=reason)
        self.errors = errors or []


class NotFoundOrForbiddenError(AppError):
    """Resource absent or owned by someone else."""
    kind = ErrorKind.NOT_FOUND_OR_FORBIDDEN
    status_code = 404
    default_message = "Content not found or you don't have permission to delete it"


class NotFoundError(AppError):
    """Resource not found."""
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Resource not found"
