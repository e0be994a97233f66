"""Session Context: tests for the login marker form.

Tests cover:
    - to_marker carries the user in camelCase and never the password
    - from_marker rebuilds user and timestamp
    - Unauthenticated or empty markers yield None
"""

from datetime import datetime, timezone

from copejem.core.session_context import SessionContext
from copejem.schemas.member import Member

NOW = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)

ADMIN = Member(
    id="1", name="Gabrielle Elias", email="email@makework.tech",
    password="Teste@123", is_admin=True, admission_year=2024,
)


def test_marker_excludes_password():
    marker = SessionContext(user=ADMIN, authenticated_at=NOW).to_marker()
    assert marker["isAuthenticated"] is True
    assert "password" not in marker["currentUser"]
    assert marker["currentUser"]["isAdmin"] is True
    assert marker["currentUser"]["admissionYear"] == 2024


def test_marker_round_trip():
    ctx = SessionContext(user=ADMIN, authenticated_at=NOW)
    rebuilt = SessionContext.from_marker(ctx.to_marker())
    assert rebuilt.user_id == "1"
    assert rebuilt.is_admin is True
    assert rebuilt.authenticated_at == NOW
    assert rebuilt.user.password is None


def test_unauthenticated_marker_is_none():
    assert SessionContext.from_marker({"isAuthenticated": False}) is None
    assert SessionContext.from_marker({}) is None
