"""API test fixtures — a fresh app and ASGI client per test.

Invariants:
    - Every test gets its own ProcessState (counter starts at 0)
    - Requests go through the ASGI app in-process, no socket
"""

import time

import pytest
from httpx import ASGITransport, AsyncClient

from heartbeat.config import Settings
from heartbeat.core.process_state import ProcessState
from heartbeat.main import create_app


@pytest.fixture
def state():
    # Started one second ago so uptime_ms is strictly positive
    return ProcessState(started_at=time.monotonic() - 1.0)


@pytest.fixture
def app(state):
    return create_app(Settings(_env_file=None), state=state)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
