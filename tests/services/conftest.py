"""Service test fixtures: seeded members, session contexts, FastAPI test client.

Invariants:
    - Fixtures run once per storage backend (record_stores is parametrized)
    - Members created here bypass the access gate (repository-level create)
    - client points app.state.services at the test services; no lifespan runs

Design Decisions:
    - Bearer sessions are cleared around each client test so tokens never leak
      between tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from copejem.api.dependencies import _sessions
from copejem.core.session_context import SessionContext
from copejem.main import app

ADMIN_PASSWORD = "Admin@123"
MEMBER_PASSWORD = "Member@123"


@pytest.fixture
async def admin(services):
    return await services.members.members.create({
        "name": "Gabrielle Elias", "email": "admin@copejem.org",
        "password": ADMIN_PASSWORD, "tax_id": "000.000.000-00",
        "is_admin": True, "role": "President", "admission_year": 2024,
    })


@pytest.fixture
async def regular(services):
    return await services.members.members.create({
        "name": "Bruno Reis", "email": "bruno@copejem.org",
        "password": MEMBER_PASSWORD, "admission_year": 2025,
    })


@pytest.fixture
def admin_ctx(admin, clock):
    return SessionContext(user=admin, authenticated_at=clock())


@pytest.fixture
def regular_ctx(regular, clock):
    return SessionContext(user=regular, authenticated_at=clock())


@pytest.fixture
async def client(services):
    """FastAPI test client wired to the per-test services."""
    app.state.services = services
    _sessions.clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    _sessions.clear()
    del app.state.services


async def _login(client, identifier, password) -> dict:
    res = await client.post(
        "/api/v1/auth/login", json={"identifier": identifier, "password": password},
    )
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
async def admin_headers(client, admin):
    return await _login(client, admin.email, ADMIN_PASSWORD)


@pytest.fixture
async def regular_headers(client, regular):
    return await _login(client, regular.email, MEMBER_PASSWORD)
