"""Error Handlers - global exception handlers for the player registry API.

Invariants:
    - PlayerRegistryError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 with per-field details named like domain violations
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import PlayerRegistryError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register player registry domain/infrastructure error handler."""

    @app.exception_handler(PlayerRegistryError)
    async def player_registry_error_handler(
        request: Request, exc: PlayerRegistryError,
    ):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
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
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


_REQUEST_PARTS = ("body", "query", "path")


def _violation_detail(error: dict) -> dict:
    """One request-validation error, keyed by the player field it concerns.

    loc ("body", "race") becomes field "race" with location "body", so the
    field matches the names domain validation reports.
    """
    loc = tuple(str(part) for part in error["loc"])
    location = loc[0] if loc and loc[0] in _REQUEST_PARTS else None
    field_path = loc[1:] if location else loc
    return {
        "field": ".".join(field_path) or None,
        "location": location,
        "message": error["msg"],
        "type": error["type"],
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [_violation_detail(e) for e in exc.errors()]
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "context": {"field": details[0]["field"] if details else None},
            "details": details,
        },
    }
