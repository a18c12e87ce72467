"""Error Handlers — global exception handlers for the wallet API.

Invariants:
    - WalletError → its own status + {message, code, error}
    - RequestValidationError → 400 with field-level details
    - StarletteHTTPException (unknown route, wrong method) → same JSON shape
    - Exception (catch-all) → 500, never leaks internal details
    - error holds debug details only when settings.environment is "development"
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wallet_api.config import get_settings
from wallet_api.core.errors import WalletError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_wallet_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _expose_details() -> bool:
    return get_settings().is_development


def _register_wallet_error_handler(app: FastAPI) -> None:

    @app.exception_handler(WalletError)
    async def wallet_error_handler(request: Request, exc: WalletError):
        """Handle all wallet domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"WalletError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(expose_details=_expose_details()),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Framework-level HTTP errors use the same JSON shape as domain errors."""
        error: dict = {}
        if _expose_details():
            error = {"path": request.url.path, "method": request.method}
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail), "code": f"HTTP_{exc.status_code}", "error": error},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details outside development."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error: dict = {}
        if _expose_details():
            error = {
                "type": type(exc).__name__,
                "detail": str(exc),
                "severity": ErrorSeverity.CRITICAL.value,
            }
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
                "error": error,
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": "Invalid request data",
        "code": "VALIDATION_ERROR",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
        "error": {},
    }
