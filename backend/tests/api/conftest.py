"""API test fixtures: FastAPI test client with a scripted account server.

Invariants:
    - get_session_manager overridden to a SessionManager over FakeAccountServer
    - Lifespan is not run: no real HTTP account server is ever built
"""

import pytest
from httpx import ASGITransport, AsyncClient

from accountgate.api.dependencies import get_session_manager
from accountgate.main import app
from accountgate.services.session_manager import SessionManager

from tests.services.fake_account_server import FakeAccountServer


@pytest.fixture
def fake_server():
    return FakeAccountServer()


@pytest.fixture
def session_manager(fake_server):
    return SessionManager(fake_server, lambda password: password)


@pytest.fixture
async def client(session_manager):
    app.dependency_overrides[get_session_manager] = lambda: session_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
