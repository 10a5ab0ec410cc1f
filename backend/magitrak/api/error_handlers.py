"""Error Handlers — global exception handlers for the Magitrak API.

Invariants:
    - MagitrakError → structured JSON with error code, message, severity
    - RequestValidationError (unparseable or ill-typed payload) → 400 MALFORMED_INPUT with field details
    - Exception (catch-all) → never leaks internal details
    - Every error terminates the request with an explicit status; nothing is retried

Design Decisions:
    - Three-layer handler: domain (MagitrakError), validation (Pydantic), catch-all (Exception)
    - Client errors logged at WARNING, store/internal errors at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from magitrak.core.errors import MagitrakError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_magitrak_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_magitrak_error_handler(app: FastAPI) -> None:
    """Register Magitrak domain/store error handler."""

    @app.exception_handler(MagitrakError)
    async def magitrak_error_handler(request: Request, exc: MagitrakError):
        """Handle all Magitrak domain/store errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"MagitrakError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "owner_id": exc.context.owner_id,
                "match_id": exc.context.match_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request payloads."""
        logger.warning(
            f"Malformed input on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured malformed-input error response."""
    return {
        "error": {
            "code": "MALFORMED_INPUT",
            "message": "Request payload could not be parsed",
            "category": ErrorCategory.MALFORMED_INPUT.value,
            "severity": ErrorSeverity.WARNING.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
