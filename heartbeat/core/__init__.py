"""Core Layer — routing rules and process state, no IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Routing is deterministic given the path and ProcessState
"""
