"""
Error hierarchy for the user account service.

Use cases and repositories raise these; the API layer turns every AppError
into a ``{statusCode, message}`` response in one place
(see ``api/v1/error_handlers.py``).
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class AppError(Exception):
    """Base exception for all errors that map to an HTTP status code."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class NotFoundError(AppError):
    """Raised when a user or token cannot be found."""
    status_code = 404
    default_message = "Not found"


class ConflictError(AppError):
    """Raised when the request conflicts with existing state (duplicate email)."""
    status_code = 409
    default_message = "Conflict"


class BadRequestError(AppError):
    """Raised when request input is unusable (bad upload type, etc.)."""
    status_code = 400
    default_message = "Bad request"


class FileTooLargeError(BadRequestError):
    """Raised when an uploaded image exceeds the configured size limit."""
    default_message = "File too large"


class UnauthorizedError(AppError):
    """Raised when an activation token cannot be verified."""
    status_code = 401
    default_message = "Unauthorized"


class InvalidTokenError(UnauthorizedError):
    """Raised by TokenCodec for malformed, tampered or expired tokens."""
    default_message = "Invalid token"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class DispatchError(AppError):
    """Raised when an email cannot be handed to the mail transport."""
    status_code = 500
    default_message = "Failed to send email"
