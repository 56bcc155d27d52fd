"""Error Hierarchy — typed, categorized exceptions for every Heartbeat failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces a single-key object: {"error": <code>}
    - No internal details leaked in response bodies

Design Decisions:
    - Single hierarchy with HeartbeatError base: FastAPI global handler catches all
    - Unmatched routes are an error *value*, not a raised failure: the router
      converts UnmatchedRouteError into the 404 body and keeps serving
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    NETWORK = "network"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never for response bodies."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class HeartbeatError(Exception):
    """Base exception for all Heartbeat errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.code}


# ─── Routing (400-level) ────────────────────────────────────────

class UnmatchedRouteError(HeartbeatError):
    """No route matched the request path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"No route for path {path!r}",
            "not_found", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.path = path


# ─── Infrastructure (500-level) ─────────────────────────────────

class ListenerError(HeartbeatError):
    """Listening socket could not be bound."""
    def __init__(
        self, message: str, host: str, port: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"host": host, "port": port}
        super().__init__(
            f"Cannot listen on {host}:{port}: {message}",
            "listener_unavailable", ErrorCategory.NETWORK,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.host = host
        self.port = port
