"""Request Router — maps a request path to one of three fixed JSON responses.

Invariants:
    - Priority order is fixed: /ready, then / and /healthz, then not-found
    - Only the greeting route mutates ProcessState (counter +1 before the body is built)
    - Each branch returns exactly its own key set, nothing more, nothing less
    - Method, query string and body never influence the outcome

Design Decisions:
    - classify_path() is the routing rule alone, handle() adds the side effects,
      so the priority order is testable without touching the counter
    - Clock injected into Router: the greeting timestamp is deterministic in tests
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from heartbeat.core.errors import UnmatchedRouteError
from heartbeat.core.process_state import ProcessState

JSON_MEDIA_TYPE = "application/json"

READY_PATH = "/ready"
GREETING_PATHS = ("/", "/healthz")


class Route(str, Enum):
    """Routing outcomes, in priority order."""
    READY = "ready"
    GREETING = "greeting"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class RouteResponse:
    """One response, built fresh per request."""
    status_code: int
    body: dict = field(default_factory=dict)
    media_type: str = JSON_MEDIA_TYPE


def classify_path(path: str) -> Route:
    """First match wins. Empty or malformed paths are NOT_FOUND."""
    if path == READY_PATH:
        return Route.READY
    if path in GREETING_PATHS:
        return Route.GREETING
    return Route.NOT_FOUND


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Router:
    """Dispatches paths against a ProcessState."""

    def __init__(
        self,
        state: ProcessState,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.state = state
        self._clock = clock

    def handle(self, path: str) -> RouteResponse:
        route = classify_path(path)
        if route is Route.READY:
            return RouteResponse(200, {
                "status": "ok",
                "uptime_ms": self.state.uptime_ms(),
            })
        if route is Route.GREETING:
            counter = self.state.increment_counter()
            return RouteResponse(200, {
                "message": "hello",
                "counter": counter,
                "time": format_timestamp(self._clock()),
            })
        error = UnmatchedRouteError(path)
        return RouteResponse(error.http_status, error.to_response())
