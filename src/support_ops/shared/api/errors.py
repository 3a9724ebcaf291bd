"""
Error Classification
====================

Maps failures onto HTTP status codes and the failure envelope.

- Validation errors            -> 400 "Bad request"
- Missing tickets/routes       -> 404 "Not found"
- Store connection/auth errors -> 500 "Database connection failed"
- Store timeouts               -> 504 "Request timeout"
- Anything else                -> 500, message hidden in production
"""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from support_ops.core import (
    ApplicationException,
    DatabaseUnavailableException,
    QueryTimeoutException,
    ResourceNotFoundException,
    ValidationException,
)
from support_ops.shared.api.responses import error_response
from support_ops.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

GENERIC_ERROR_CATEGORY = "Internal server error"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

# Exceptions whose message is always safe to show to clients
_PUBLIC_EXCEPTIONS = (
    ValidationException,
    ResourceNotFoundException,
    DatabaseUnavailableException,
    QueryTimeoutException,
)


def classify_exception(exc: BaseException, expose_details: bool) -> tuple[int, dict]:
    """
    Return ``(status_code, envelope)`` for any exception.

    Args:
        exc: The failure to classify
        expose_details: Include the raw message of unexpected errors
            (non-production deployments only)
    """
    if isinstance(exc, _PUBLIC_EXCEPTIONS):
        return exc.status_code, error_response(exc.category, exc.message)

    message = str(exc) if expose_details and str(exc) else GENERIC_ERROR_MESSAGE
    return 500, error_response(GENERIC_ERROR_CATEGORY, message)


def _expose_details(request: Request) -> bool:
    app_settings = getattr(request.app.state, "settings", None)
    return app_settings is not None and not app_settings.is_production


def _correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", "unknown")


async def application_exception_handler(
    request: Request, exc: ApplicationException
) -> JSONResponse:
    """Render typed application errors."""
    status_code, body = classify_exception(exc, _expose_details(request))

    log = logger.warning if status_code < 500 else logger.error
    log(
        "Request failed",
        extra={
            "correlation_id": _correlation_id(request),
            "path": request.url.path,
            "status_code": status_code,
            "error_type": type(exc).__name__,
            "error_message": exc.message,
        }
    )
    return JSONResponse(status_code=status_code, content=body)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors (unknown routes, wrong methods)."""
    if exc.status_code == 404:
        body = error_response("Not found", f"Route {request.url.path} not found")
    else:
        body = error_response(HTTPStatus(exc.status_code).phrase, str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request validation failures as 400 instead of FastAPI's 422."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content=error_response(ValidationException.category, problems or "Invalid request"),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for unhandled exceptions.

    Returns consistent error responses for all exceptions.
    """
    logger.error(
        "Unhandled exception",
        extra={
            "correlation_id": _correlation_id(request),
            "path": request.url.path,
            "method": request.method,
            "error_type": type(exc).__name__,
            "error_message": str(exc),
        }
    )

    # Don't expose internal details in production
    status_code, body = classify_exception(exc, _expose_details(request))
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationException, application_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
