"""Process State — start time and greeting counter shared by all requests.

Invariants:
    - started_at is captured once at construction and never written again
    - counter starts at 0 and only moves through increment_counter(), by exactly 1
    - increment-then-read is a single critical section (no lost updates,
      no two callers observe the same value)

Design Decisions:
    - Explicit object held by the Router, not module globals: tests build a
      fresh state per case
    - threading.Lock rather than relying on the event loop: the router stays
      correct when called from a threadpool
    - Uptime from time.monotonic(): wall-clock adjustments never make it negative
"""

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ProcessState:
    """Process-lifetime state — owned by the Router."""

    # Monotonic reference point for uptime
    started_at: float = field(default_factory=time.monotonic)

    # Wall-clock start, for diagnostics only
    started_wall: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    _counter: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False,
    )

    @property
    def counter(self) -> int:
        return self._counter

    def increment_counter(self) -> int:
        """Add 1 to the counter and return the new value atomically."""
        with self._lock:
            self._counter += 1
            return self._counter

    def uptime_ms(self, now: float | None = None) -> int:
        """Milliseconds since started_at, never negative."""
        if now is None:
            now = time.monotonic()
        return max(0, int((now - self.started_at) * 1000))
