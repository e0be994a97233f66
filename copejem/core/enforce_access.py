"""Authorization Gate: who may edit credentials and grant admin rights.

Invariants:
    - Password editable iff record has no id yet OR actor is admin OR actor edits self
    - is_admin may only be changed by an actor who is already admin
    - A non-admin submitting the unchanged is_admin value is not a violation
    - All functions are PURE; check_member_write returns the error, never raises

Design Decisions:
    - This module is the sole enforcement point; repositories do not re-check
    - editable_member_fields() lets a form hide fields up front; the same rules
      back check_member_write() for submissions
"""

from copejem.core.domain_types import Patch
from copejem.core.errors import ErrorContext, PermissionDeniedError
from copejem.core.session_context import SessionContext
from copejem.schemas.member import Member

MEMBER_FORM_FIELDS = frozenset({
    "name", "email", "phone", "tax_id", "role", "admission_year",
    "exit_year", "company_id", "status", "avatar_url",
})


def can_change_password(ctx: SessionContext | None, record_id: str | None) -> bool:
    if record_id is None:
        return True
    if ctx is None:
        return False
    return ctx.is_admin or ctx.user_id == record_id


def can_grant_admin(ctx: SessionContext | None) -> bool:
    return ctx is not None and ctx.is_admin


def editable_member_fields(
    ctx: SessionContext | None, record_id: str | None,
) -> frozenset[str]:
    """Fields the member form may expose for this actor and record."""
    fields = set(MEMBER_FORM_FIELDS)
    if can_change_password(ctx, record_id):
        fields.add("password")
    if can_grant_admin(ctx):
        fields.add("is_admin")
    return frozenset(fields)


def check_member_write(
    ctx: SessionContext | None, existing: Member | None, patch: Patch,
) -> PermissionDeniedError | None:
    """Gate a member create (existing=None) or update against the actor."""
    record_id = existing.id if existing else None
    error_ctx = ErrorContext(
        entity_kind="members",
        entity_id=record_id,
        actor_id=ctx.user_id if ctx else None,
    )
    if patch.get("password") and not can_change_password(ctx, record_id):
        return PermissionDeniedError("password", error_ctx)
    if "is_admin" in patch and not can_grant_admin(ctx):
        current = existing.is_admin if existing else False
        if bool(patch["is_admin"]) != current:
            return PermissionDeniedError("is_admin", error_ctx)
    return None
