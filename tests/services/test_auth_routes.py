"""Auth Routes: login, session marker, logout over HTTP.

Tests cover:
    - Successful login returns a bearer token and a password-free marker
    - Failed login is a 401
    - /me requires a valid token; logout invalidates it
"""


async def test_login_returns_token_and_marker(client, admin):
    res = await client.post(
        "/api/v1/auth/login",
        json={"identifier": "admin@copejem.org", "password": "Admin@123"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["token"]
    assert body["session"]["isAuthenticated"] is True
    assert body["session"]["currentUser"]["id"] == admin.id
    assert "password" not in body["session"]["currentUser"]


async def test_login_with_wrong_password(client, admin):
    res = await client.post(
        "/api/v1/auth/login",
        json={"identifier": "admin@copejem.org", "password": "wrong"},
    )
    assert res.status_code == 401


async def test_me_requires_token(client):
    res = await client.get("/api/v1/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_me_rejects_unknown_token(client):
    res = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 401


async def test_me_returns_marker(client, admin_headers, admin):
    res = await client.get("/api/v1/auth/me", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["currentUser"]["email"] == admin.email


async def test_logout_invalidates_token(client, admin_headers):
    res = await client.post("/api/v1/auth/logout", headers=admin_headers)
    assert res.status_code == 204
    res = await client.get("/api/v1/auth/me", headers=admin_headers)
    assert res.status_code == 401
