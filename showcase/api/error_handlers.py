"""
Exception handlers.

Maps domain exceptions onto JSON error bodies of the form
{"error": message, "details": {...}}.

Dependencies: fastapi, showcase.core.exceptions
System role: Uniform HTTP error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from showcase.core.exceptions import ServiceError, ShowcaseException, ValidationError
from showcase.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: ShowcaseException) -> JSONResponse:
    body = ErrorResponse(error=exc.message, details=exc.details or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(
        "Invalid request",
        extra={"path": request.url.path, "error": exc.message},
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.error(
        "Backend service failure",
        extra={"path": request.url.path, "error": exc.message},
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unexpected failure",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain exception handlers to the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
