"""Authorization Gate: tests for password and admin-flag editing rules.

Tests cover:
    - can_change_password: new records, admins, self-edit, others
    - can_grant_admin: only existing admins
    - editable_member_fields exposes password / is_admin per actor
    - check_member_write returns PermissionDeniedError on violations
    - A non-admin resubmitting the unchanged is_admin value passes
"""

from datetime import datetime, timezone

from copejem.core.enforce_access import (
    MEMBER_FORM_FIELDS, can_change_password, can_grant_admin,
    check_member_write, editable_member_fields,
)
from copejem.core.errors import PermissionDeniedError
from copejem.core.session_context import SessionContext
from copejem.schemas.member import Member

NOW = datetime(2025, 3, 1, tzinfo=timezone.utc)


def _member(member_id: str, is_admin: bool = False) -> Member:
    return Member(
        id=member_id, name=f"Member {member_id}", email=f"{member_id}@copejem.org",
        password="secret", is_admin=is_admin, admission_year=2024,
    )


def _ctx(member: Member) -> SessionContext:
    return SessionContext(user=member, authenticated_at=NOW)


ADMIN = _ctx(_member("a1", is_admin=True))
REGULAR = _ctx(_member("m1"))


# ─── can_change_password ─────────────────────────────────────────

def test_password_settable_on_new_record_by_anyone():
    assert can_change_password(None, None) is True
    assert can_change_password(REGULAR, None) is True


def test_admin_can_change_any_password():
    assert can_change_password(ADMIN, "m2") is True


def test_member_can_change_own_password():
    assert can_change_password(REGULAR, "m1") is True


def test_member_cannot_change_other_password():
    assert can_change_password(REGULAR, "m2") is False


def test_no_session_cannot_change_existing_password():
    assert can_change_password(None, "m1") is False


# ─── can_grant_admin / editable_member_fields ────────────────────

def test_only_admin_can_grant_admin():
    assert can_grant_admin(ADMIN) is True
    assert can_grant_admin(REGULAR) is False
    assert can_grant_admin(None) is False


def test_admin_sees_every_field():
    fields = editable_member_fields(ADMIN, "m2")
    assert fields == MEMBER_FORM_FIELDS | {"password", "is_admin"}


def test_regular_member_editing_other_sees_no_credentials():
    fields = editable_member_fields(REGULAR, "m2")
    assert "password" not in fields
    assert "is_admin" not in fields


def test_regular_member_editing_self_sees_password_only():
    fields = editable_member_fields(REGULAR, "m1")
    assert "password" in fields
    assert "is_admin" not in fields


# ─── check_member_write ─────────────────────────────────────────

def test_non_admin_granting_admin_is_denied():
    error = check_member_write(REGULAR, _member("m2"), {"is_admin": True})
    assert isinstance(error, PermissionDeniedError)
    assert error.field == "is_admin"
    assert error.http_status == 403


def test_non_admin_creating_admin_is_denied():
    error = check_member_write(REGULAR, None, {"is_admin": True, "password": "x"})
    assert error is not None
    assert error.field == "is_admin"


def test_non_admin_sending_unchanged_admin_flag_passes():
    assert check_member_write(REGULAR, _member("m2"), {"is_admin": False}) is None


def test_non_admin_changing_other_password_is_denied():
    error = check_member_write(REGULAR, _member("m2"), {"password": "new"})
    assert error is not None
    assert error.field == "password"
    assert error.context.actor_id == "m1"


def test_empty_password_is_not_a_change():
    assert check_member_write(REGULAR, _member("m2"), {"password": ""}) is None


def test_admin_may_change_anything():
    patch = {"password": "new", "is_admin": True}
    assert check_member_write(ADMIN, _member("m2"), patch) is None
