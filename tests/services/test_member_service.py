"""Member Service: denormalization, inline company creation and the access gate.

Tests cover:
    - company_name mirrors the referenced company; clearing the link blanks it
    - Unknown company_id is rejected; company_name is never caller-supplied
    - Inline company creation links the new company
    - A failed member write after inline creation leaves the company behind
    - Password required on create, kept on empty update
    - Generated avatars follow renames; unrelated updates touch nothing else
    - Admin flag and password changes are gated by the session
"""

import pytest

from copejem.core.errors import (
    PermissionDeniedError, ResourceNotFoundError, ValidationFailedError,
)


def _fields(**overrides) -> dict:
    fields = {
        "name": "Carla Dias", "email": "carla@copejem.org",
        "password": "Carla@123", "admission_year": 2025,
    }
    fields.update(overrides)
    return fields


async def test_company_name_mirrors_company(services, admin_ctx):
    company = await services.companies.create_company({"name": "MakeWork"})
    member = await services.members.create_member(_fields(company_id=company.id), admin_ctx)
    assert member.company_id == company.id
    assert member.company_name == "MakeWork"


async def test_unknown_company_id_rejected(services, admin_ctx):
    with pytest.raises(ResourceNotFoundError):
        await services.members.create_member(_fields(company_id="nope"), admin_ctx)


async def test_company_name_cannot_be_supplied(services, admin_ctx):
    with pytest.raises(ValidationFailedError) as exc:
        await services.members.create_member(_fields(company_name="Fake"), admin_ctx)
    assert exc.value.field == "company_name"


async def test_clearing_company_blanks_name(services, admin_ctx):
    company = await services.companies.create_company({"name": "MakeWork"})
    member = await services.members.create_member(_fields(company_id=company.id), admin_ctx)
    updated = await services.members.update_member(member.id, {"company_id": None}, admin_ctx)
    assert updated.company_id is None
    assert updated.company_name == ""


async def test_inline_company_creation(services, admin_ctx):
    member = await services.members.create_member(
        _fields(), admin_ctx, new_company={"name": "Padaria Sol", "industry": "Alimentos"},
    )
    companies = await services.companies.companies.get_all()
    assert [c.name for c in companies] == ["Padaria Sol"]
    assert member.company_id == companies[0].id
    assert member.company_name == "Padaria Sol"


async def test_inline_company_on_update(services, admin_ctx, regular):
    updated = await services.members.update_member(
        regular.id, {}, admin_ctx, new_company={"name": "Byte Labs"},
    )
    assert updated.company_name == "Byte Labs"


async def test_failed_member_write_leaves_inline_company(services, admin_ctx):
    fields = _fields()
    del fields["email"]
    with pytest.raises(ValidationFailedError):
        await services.members.create_member(
            fields, admin_ctx, new_company={"name": "Orphan Co"},
        )
    assert [c.name for c in await services.companies.companies.get_all()] == ["Orphan Co"]


async def test_denied_write_creates_no_company(services, regular_ctx):
    with pytest.raises(PermissionDeniedError):
        await services.members.create_member(
            _fields(is_admin=True), regular_ctx, new_company={"name": "Never"},
        )
    assert await services.companies.companies.get_all() == []


async def test_password_required_on_create(services, admin_ctx):
    with pytest.raises(ValidationFailedError) as exc:
        await services.members.create_member(_fields(password=""), admin_ctx)
    assert exc.value.field == "password"


async def test_empty_password_on_update_keeps_stored(services, admin_ctx, regular):
    updated = await services.members.update_member(
        regular.id, {"password": "", "phone": "44 99999-0000"}, admin_ctx,
    )
    assert updated.password == regular.password
    assert updated.phone == "44 99999-0000"


async def test_default_avatar_generated(services, admin_ctx):
    member = await services.members.create_member(_fields(), admin_ctx)
    assert member.avatar_url.startswith("https://ui-avatars.com/api/?name=Carla%20Dias")


async def test_unrelated_update_leaves_other_fields(services, admin_ctx, regular):
    assert regular.avatar_url is None
    updated = await services.members.update_member(regular.id, {"phone": "123"}, admin_ctx)
    assert updated.model_dump() == {**regular.model_dump(), "phone": "123"}


async def test_rename_regenerates_generated_avatar(services, admin_ctx):
    member = await services.members.create_member(_fields(), admin_ctx)
    updated = await services.members.update_member(
        member.id, {"name": "New Name"}, admin_ctx,
    )
    assert updated.avatar_url.startswith("https://ui-avatars.com/api/?name=New%20Name")


async def test_rename_keeps_uploaded_avatar(services, admin_ctx):
    member = await services.members.create_member(
        _fields(avatar_url="https://cdn.copejem.org/carla.png"), admin_ctx,
    )
    updated = await services.members.update_member(
        member.id, {"name": "New Name"}, admin_ctx,
    )
    assert updated.avatar_url == "https://cdn.copejem.org/carla.png"


async def test_missing_admission_year_names_python_field(services, admin_ctx):
    fields = _fields()
    del fields["admission_year"]
    with pytest.raises(ValidationFailedError) as exc:
        await services.members.create_member(fields, admin_ctx)
    assert exc.value.field == "admission_year"


async def test_overlong_name_rejected(services, admin_ctx):
    with pytest.raises(ValidationFailedError) as exc:
        await services.members.create_member(_fields(name="x" * 201), admin_ctx)
    assert exc.value.field == "name"


async def test_non_admin_cannot_grant_admin(services, regular_ctx, regular):
    with pytest.raises(PermissionDeniedError) as exc:
        await services.members.update_member(regular.id, {"is_admin": True}, regular_ctx)
    assert exc.value.field == "is_admin"
    assert (await services.members.members.get_by_id(regular.id)).is_admin is False


async def test_non_admin_unchanged_admin_flag_passes(services, regular_ctx, regular):
    updated = await services.members.update_member(
        regular.id, {"is_admin": False, "phone": "123"}, regular_ctx,
    )
    assert updated.phone == "123"


async def test_non_admin_cannot_change_other_password(services, regular_ctx, admin):
    with pytest.raises(PermissionDeniedError):
        await services.members.update_member(admin.id, {"password": "hacked"}, regular_ctx)


async def test_member_changes_own_password(services, regular_ctx, regular):
    updated = await services.members.update_member(
        regular.id, {"password": "Nova@2025"}, regular_ctx,
    )
    assert updated.password == "Nova@2025"


async def test_admin_grants_admin(services, admin_ctx, regular):
    updated = await services.members.update_member(regular.id, {"is_admin": True}, admin_ctx)
    assert updated.is_admin is True


async def test_editable_fields(services, regular_ctx, regular, admin):
    assert "password" in services.members.editable_fields(regular_ctx, regular.id)
    assert "password" not in services.members.editable_fields(regular_ctx, admin.id)
