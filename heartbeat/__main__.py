"""Process entry point: `python -m heartbeat` or the `heartbeat` script."""

import argparse
import logging
import sys

from heartbeat.config import Settings, get_settings
from heartbeat.core.errors import ListenerError
from heartbeat.infrastructure.listener import serve
from heartbeat.infrastructure.observability import setup_logging
from heartbeat.main import create_app

logger = logging.getLogger("heartbeat")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heartbeat",
        description="Serve /ready, / and /healthz probes over HTTP.",
    )
    parser.add_argument("--host", help="Interface to bind (env HOST)")
    parser.add_argument("--port", type=int, help="TCP port to bind (env PORT)")
    parser.add_argument("--log-level", help="Root log level (env LOG_LEVEL)")
    return parser


def resolve_settings(argv: list[str] | None = None) -> Settings:
    """Environment settings with command-line overrides applied."""
    args = _build_parser().parse_args(argv)
    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    settings = get_settings()
    if not overrides:
        return settings
    return Settings.model_validate({**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    settings = resolve_settings(argv)
    setup_logging(settings.log_level, settings.log_format)
    try:
        serve(create_app(settings), settings)
    except ListenerError as exc:
        logger.error(exc.message, extra={"error_code": exc.code, "port": exc.port})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
