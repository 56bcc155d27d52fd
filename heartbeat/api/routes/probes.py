"""Probe Routes — a single catch-all endpoint that delegates to the Router.

Invariants:
    - Every path and every HTTP method reaches dispatch_request()
    - Routing sees the path as received (no percent-decoding, no query string)
    - Status and body come from Router.handle() unchanged
    - Router is read from app.state, never from a module global

Design Decisions:
    - Endpoint registered as an ASGI callable object, not a function:
      Starlette restricts function endpoints to GET/HEAD when no method
      list is given, while an ASGI app keeps methods=None (all methods)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.types import Receive, Scope, Send

from heartbeat.core.route_requests import Router

logger = logging.getLogger(__name__)

CATCH_ALL_PATH = "/{path:path}"


def get_router(request: Request) -> Router:
    return request.app.state.router


def request_path(scope: Scope) -> str:
    """Path component as sent by the client, falling back to the decoded path."""
    raw = scope.get("raw_path")
    if raw is None:
        return scope["path"]
    return raw.split(b"?", 1)[0].decode("latin-1")


async def dispatch_request(request: Request) -> JSONResponse:
    """Answer any request from its path alone."""
    path = request_path(request.scope)
    result = get_router(request).handle(path)
    if result.status_code == 404:
        logger.debug("Unmatched route", extra={"path": path})
    return JSONResponse(
        status_code=result.status_code,
        content=result.body,
        media_type=result.media_type,
    )


class DispatchEndpoint:
    """ASGI wrapper around dispatch_request()."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response = await dispatch_request(Request(scope, receive))
        await response(scope, receive, send)


def register_probe_routes(app: FastAPI) -> None:
    app.add_route(
        CATCH_ALL_PATH, DispatchEndpoint(),
        name="probes", include_in_schema=False,
    )
