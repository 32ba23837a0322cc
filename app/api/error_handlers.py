"""Error Handlers: global exception handlers producing the error envelope.

Invariants:
    - TaskTrackerError -> its own http_status and code
    - RequestValidationError -> 400 VALIDATION_ERROR with field-level details
    - Exception (catch-all) -> 500 INTERNAL_ERROR, message masked in production
    - Every error logged exactly once, here (warning for 4xx, error for 5xx)
    - Log records carry error_code, severity, and category as extra fields
    - Development responses carry the stack trace under error.stack

Design Decisions:
    - Three-layer handler: domain (TaskTrackerError), validation (Pydantic), catch-all (Exception)
    - Settings read per error, not at registration: tests switch environments freely
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.config import get_settings
from app.core.errors import (
    ErrorCategory, ErrorSeverity, TaskTrackerError, ValidationError,
)

logger = logging.getLogger(__name__)

MASKED_MESSAGE = "Internal server error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TaskTrackerError)
    async def domain_error_handler(request: Request, exc: TaskTrackerError):
        """Handle all Task Tracker domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            exc_info=exc if exc.http_status >= 500 else None,
            extra={
                "error_code": exc.code,
                "severity": exc.severity.value,
                "category": exc.category.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=_with_stack(exc.to_response(), exc),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors with structured response."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={
                "error_code": "VALIDATION_ERROR",
                "severity": ErrorSeverity.WARNING.value,
                "category": ErrorCategory.VALIDATION.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error(exc).to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: real message outside production, masked inside it."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={
                "error_code": "INTERNAL_ERROR",
                "severity": ErrorSeverity.CRITICAL.value,
                "category": ErrorCategory.INTERNAL.value,
                "path": request.url.path,
            },
        )
        message = MASKED_MESSAGE
        if not get_settings().is_production:
            message = str(exc) or MASKED_MESSAGE
        content = {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": message},
        }
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_with_stack(content, exc),
        )


def build_validation_error(exc: RequestValidationError) -> ValidationError:
    """Translate Pydantic errors into a ValidationError with field details."""
    return ValidationError(
        "Validation failed",
        details=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    )


def _with_stack(content: dict, exc: BaseException) -> dict:
    if get_settings().is_development:
        content["error"]["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__),
        )
    return content
