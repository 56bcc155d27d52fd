"""Heartbeat — liveness, readiness and greeting probes for a single process.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
