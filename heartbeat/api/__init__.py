"""API Layer — FastAPI route registration and error handlers.

Invariants:
    - Every response body is a single JSON object
    - Routes delegate to core.route_requests (no routing logic here)
"""
