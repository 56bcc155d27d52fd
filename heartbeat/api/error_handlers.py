"""Error Handlers — global exception handlers for the Heartbeat API.

Invariants:
    - HeartbeatError → {"error": <code>} with the error's http_status
    - Exception (catch-all) → 500 {"error": "internal_error"}, never leaks internal details

Design Decisions:
    - Two-layer handler: domain (HeartbeatError), catch-all (Exception)
    - No RequestValidationError layer: no route reads a body, query or header
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from heartbeat.core.errors import HeartbeatError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_heartbeat_error_handler(app)
    _register_generic_error_handler(app)


def _register_heartbeat_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HeartbeatError)
    async def heartbeat_error_handler(request: Request, exc: HeartbeatError):
        """Handle all Heartbeat domain/infrastructure errors."""
        logger.error(
            f"HeartbeatError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal_error"},
        )
