"""Heartbeat API — FastAPI application factory.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One ProcessState per app, created when the app is created, held on app.state
    - Generated docs disabled: /docs, /redoc and /openapi.json answer 404 like any unknown path

Design Decisions:
    - create_app() factory over a bare module-level app: tests get a fresh
      counter per app, the entry point passes its own Settings in
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from heartbeat import __version__
from heartbeat.api.error_handlers import register_error_handlers
from heartbeat.api.routes.probes import register_probe_routes
from heartbeat.config import Settings, get_settings
from heartbeat.core.process_state import ProcessState
from heartbeat.core.route_requests import Router
from heartbeat.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "Heartbeat API started", extra={"service": settings.service_name},
    )
    yield
    logger.info(
        "Heartbeat API shutting down",
        extra={"service": settings.service_name},
    )


def create_app(
    settings: Settings | None = None, state: ProcessState | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Heartbeat API",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.router = Router(state or ProcessState())

    register_error_handlers(app)
    register_probe_routes(app)
    return app


app = create_app()
