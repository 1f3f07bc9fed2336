"""API Dependencies: resolves the process-wide SessionManager for route handlers.

Invariants:
    - The manager is created by the lifespan and stored on app.state
    - Tests replace get_session_manager through app.dependency_overrides
"""

from fastapi import Request

from accountgate.services.session_manager import SessionManager


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager
