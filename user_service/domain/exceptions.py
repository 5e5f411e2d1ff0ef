"""
Custom exception hierarchy for the user accounts service.

Raised by use cases, repositories and storage. All service errors inherit from
UserServiceError and carry the user-facing message returned by the API.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    default_message = "An error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class InputValidationError(UserServiceError):
    """Raised when request fields fail their format rules."""

    default_message = "Validation failed"

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        super().__init__(message, details={"errors": errors})
        self.errors = errors


# -----------------------------------------------------------------------------
# Lookup and uniqueness
# -----------------------------------------------------------------------------


class UserNotFoundError(UserServiceError):
    """Raised when no user matches the given email."""

    default_message = "User not found"


class ConflictError(UserServiceError):
    """Base exception for requests that clash with existing state."""

    default_message = "Conflict"


class UserAlreadyExistsError(ConflictError):
    """Raised when the email is already taken."""

    default_message = "User already exists"


class ImageAlreadyUploadedError(ConflictError):
    """Raised when the user already has a profile image."""

    default_message = "Image already uploaded"


# -----------------------------------------------------------------------------
# Uploads
# -----------------------------------------------------------------------------


class UploadRejectedError(UserServiceError):
    """Base exception for files refused by the upload filter."""
    pass


class UnsupportedImageFormatError(UploadRejectedError):
    """Raised when the declared content type is not an allowed image type."""

    default_message = "Unsupported file format"


class ImageTooLargeError(UploadRejectedError):
    """Raised when the uploaded file exceeds the size limit."""

    default_message = "File too large"


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------


class StorageError(UserServiceError):
    """Raised when the database or filesystem fails unexpectedly."""

    default_message = "Storage failure"


class InternalServiceError(UserServiceError):
    """Raised at the API boundary for any unexpected failure of an operation.

    `message` is the operation-level text shown to clients; `cause` keeps the
    underlying error text, which is only exposed when explicitly configured.
    """

    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, cause: Optional[str] = None):
        super().__init__(message, details={"cause": cause} if cause else None)
        self.cause = cause
