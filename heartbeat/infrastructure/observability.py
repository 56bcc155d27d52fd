"""Logging — JSON formatter and setup for the process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (path, error_code, port, service) surfaced when present
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - JSON in production, human-readable ("text") for local runs
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("path", "error_code", "port", "service")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _HeartbeatHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler again."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _HeartbeatHandler):
            logging.root.removeHandler(existing)

    handler = _HeartbeatHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
