"""
Exception-to-response mapping for the user API.

Every response body carries `message`. Validation failures add a field-keyed
`errors` map; internal failures add `error` only when EXPOSE_INTERNAL_ERRORS is on.
"""

# Standard library imports
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Type

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...core.config import Settings
from ...domain.exceptions import (
    ConflictError,
    ImageTooLargeError,
    InputValidationError,
    InternalServiceError,
    StorageError,
    UnsupportedImageFormatError,
    UserNotFoundError,
    UserServiceError,
)

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed"

STATUS_BY_ERROR: Dict[Type[UserServiceError], int] = {
    InputValidationError: status.HTTP_400_BAD_REQUEST,
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ImageTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    UnsupportedImageFormatError: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
}


def status_for(exc: UserServiceError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def internal_errors_as(message: str) -> Iterator[None]:
    """
    Re-raise unexpected failures inside the block as InternalServiceError(message).

    Client errors (validation, not found, conflict, upload filter) pass through.
    """
    try:
        yield
    except StorageError as e:
        raise InternalServiceError(message, cause=e.message) from e
    except UserServiceError:
        raise
    except Exception as e:
        raise InternalServiceError(message, cause=str(e)) from e


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "form")]
    return parts[-1] if parts else "body"


def register_exception_handlers(application: FastAPI, settings: Settings) -> None:
    """Attach the service's exception handlers to the application."""

    async def handle_service_error(request: Request, exc: UserServiceError) -> JSONResponse:
        status_code = status_for(exc)
        body: Dict[str, object] = {"message": exc.message}

        if isinstance(exc, InputValidationError):
            body["errors"] = exc.errors

        if status_code >= 500:
            cause = getattr(exc, "cause", None) or exc.message
            logger.error("%s %s failed: %s", request.method, request.url.path, cause, exc_info=exc)
            if settings.expose_internal_errors:
                body["error"] = cause
        else:
            logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc.message)

        return JSONResponse(status_code=status_code, content=body)

    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = {_field_name(error.get("loc", ())): error.get("msg", "Invalid value") for error in exc.errors()}
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": VALIDATION_FAILED_MESSAGE, "errors": errors},
        )

    application.add_exception_handler(UserServiceError, handle_service_error)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)
