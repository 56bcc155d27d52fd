"""Tests for the listener — socket binding and the startup line."""

import io
import socket

import pytest

from heartbeat.config import Settings
from heartbeat.core.errors import ListenerError
from heartbeat.infrastructure import listener
from heartbeat.infrastructure.listener import announce, bind_socket, bound_port
from heartbeat.main import create_app


def test_bind_socket_on_ephemeral_port():
    sock = bind_socket("127.0.0.1", 0)
    try:
        assert bound_port(sock) > 0
        assert sock.type == socket.SOCK_STREAM
    finally:
        sock.close()


def test_bind_socket_accepts_connections():
    sock = bind_socket("127.0.0.1", 0)
    try:
        with socket.create_connection(("127.0.0.1", bound_port(sock)), timeout=2):
            pass
    finally:
        sock.close()


def test_bind_conflict_raises_listener_error():
    taken = bind_socket("127.0.0.1", 0)
    port = bound_port(taken)
    try:
        with pytest.raises(ListenerError) as exc_info:
            bind_socket("127.0.0.1", port)
        assert exc_info.value.port == port
        assert exc_info.value.code == "listener_unavailable"
        assert isinstance(exc_info.value.__cause__, OSError)
    finally:
        taken.close()


def test_announce_prints_one_line_with_bound_port():
    sock = bind_socket("127.0.0.1", 0)
    stream = io.StringIO()
    try:
        line = announce(sock, "heartbeat", stream=stream)
        assert line == f"heartbeat listening on :{bound_port(sock)}"
        assert stream.getvalue() == line + "\n"
    finally:
        sock.close()


def test_serve_announces_before_running(monkeypatch, capsys):
    calls = []

    class _FakeServer:
        def __init__(self, config):
            self.config = config

        def run(self, sockets=None):
            calls.append(("run", bound_port(sockets[0])))

    monkeypatch.setattr(listener.uvicorn, "Server", _FakeServer)
    settings = Settings(_env_file=None, host="127.0.0.1", port=0, service_name="svc")

    listener.serve(create_app(settings), settings)

    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert out[0] == f"svc listening on :{calls[0][1]}"
    assert calls[0][0] == "run"


def test_serve_closes_socket_when_server_setup_fails(monkeypatch):
    opened = []

    def tracking_bind(host, port, backlog=128):
        sock = bind_socket(host, port, backlog)
        opened.append(sock)
        return sock

    class _BrokenServer:
        def __init__(self, config):
            raise RuntimeError("cannot start")

    monkeypatch.setattr(listener, "bind_socket", tracking_bind)
    monkeypatch.setattr(listener.uvicorn, "Server", _BrokenServer)
    settings = Settings(_env_file=None, host="127.0.0.1", port=0)

    with pytest.raises(RuntimeError):
        listener.serve(create_app(settings), settings)

    assert opened[0].fileno() == -1
