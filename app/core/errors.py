"""
Error taxonomy and its translation to HTTP.

Services raise the exceptions below. The mapping from exception to status
code lives only in :func:`status_for`; ``app.main`` registers the handlers
that turn any of them into the ``{success: false, error}`` envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.api.responses import NO_CACHE_HEADERS

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors that are safe to show to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required parameter is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class ConfigurationError(AppError):
    """A required setting is absent; fatal for the affected subsystem."""


class StoreError(AppError):
    """Wraps a driver failure; the message never reaches the caller."""


def require(**fields) -> None:
    """Raise :class:`ValidationError` naming the first empty field."""
    for name, value in fields.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{name} is required")


def status_for(exc: Exception) -> int:
    if isinstance(exc, AppError):
        return exc.status_code
    if isinstance(exc, RequestValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(exc: Exception, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_for(exc), content={"success": False, "error": message},
                        headers=NO_CACHE_HEADERS)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = jsonable_encoder(exc.errors())
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", []) if part not in ("body", "query", "path"))
    if first.get("type") == "missing":
        return f"{field} is required" if field else "Request body is required"
    return f"Invalid {field}: {first.get('msg')}" if field else f"Invalid request: {first.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    """Install the single error-to-envelope translation layer."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
            return error_response(exc, "Internal server error")
        return error_response(exc, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(exc, _describe_validation_error(exc))

    @app.exception_handler(PyMongoError)
    async def handle_store_error(request: Request, exc: PyMongoError):
        logger.exception("Document store failure on %s %s", request.method, request.url.path)
        return error_response(StoreError(str(exc)), "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(exc, "Internal server error")
