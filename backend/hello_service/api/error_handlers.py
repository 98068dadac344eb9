"""Error Handlers — global exception handlers for the service.

Invariants:
    - Wrong method on a known path → same 404 as an unknown path
    - Other HTTP exceptions keep FastAPI's default rendering
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Two-layer handler: HTTP (routing), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_service.core.errors import (
    ErrorCategory, ErrorSeverity, build_error_envelope,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404/405)."""

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logger.info(
                f"Method {request.method} not served on {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            exc = StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await http_exception_handler(request, exc)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_envelope(
                "INTERNAL_ERROR",
                "An unexpected error occurred",
                ErrorCategory.INTERNAL,
                ErrorSeverity.CRITICAL,
            ),
        )
