"""Infrastructure Layer — logging setup and the listening socket.

Invariants:
    - Infrastructure never imports routing logic from core/
"""
