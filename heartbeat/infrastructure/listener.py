"""Listener — binds the TCP socket, announces it, and hands it to uvicorn.

Invariants:
    - The startup line is printed exactly once, after the socket is listening
    - The announced port is the bound port (port 0 reports the ephemeral port)
    - Bind failures surface as ListenerError, never as a bare OSError

Design Decisions:
    - Socket bound here and passed to uvicorn via sockets=[...]: the
      announcement can only happen once the port is really ours
    - uvicorn access log off, log_config=None: our root handler owns formatting
"""

import logging
import socket
import sys
from typing import TextIO

import uvicorn
from fastapi import FastAPI

from heartbeat.config import Settings
from heartbeat.core.errors import ListenerError

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int, backlog: int = 128) -> socket.socket:
    """Open a listening TCP socket on (host, port)."""
    try:
        return socket.create_server((host, port), backlog=backlog)
    except OSError as exc:
        raise ListenerError(str(exc), host, port) from exc


def bound_port(sock: socket.socket) -> int:
    return sock.getsockname()[1]


def announce(
    sock: socket.socket, service_name: str, stream: TextIO | None = None,
) -> str:
    """Print the startup line for a listening socket and return it."""
    line = f"{service_name} listening on :{bound_port(sock)}"
    print(line, file=stream or sys.stdout, flush=True)
    return line


def serve(app: FastAPI, settings: Settings) -> None:
    """Bind, announce, and run until the process is terminated."""
    sock = bind_socket(settings.host, settings.port)
    try:
        config = uvicorn.Config(
            app,
            log_level=settings.log_level.lower(),
            log_config=None,
            access_log=False,
        )
        server = uvicorn.Server(config)
        announce(sock, settings.service_name)
        logger.info(
            "Listener bound",
            extra={"port": bound_port(sock), "service": settings.service_name},
        )
        server.run(sockets=[sock])
    finally:
        sock.close()
