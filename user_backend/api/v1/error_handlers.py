"""
Centralized error responder.

Routers never format errors themselves: they let AppError (and framework
errors) propagate, and the handlers registered here turn them into
``{statusCode, message}`` responses.
"""

# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...core.exceptions import AppError
from .responses import error_response

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.warning("%s %s -> 422: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(application: FastAPI) -> None:
    """Install the single set of error handlers on the application"""
    application.add_exception_handler(AppError, app_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
