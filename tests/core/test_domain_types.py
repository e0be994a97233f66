"""Domain Types: verifies identity wrappers and enum values.

Tests:
    - NewType wrappers exist and are callable
    - EntityKind values double as collection / table names
    - Role and status enums carry their stored string values
    - READONLY_FIELDS names exactly the repository-owned fields
"""

from copejem.core.domain_types import (
    CompanyId, MemberId, ProjectId, EntityKind, MemberRole, MemberStatus,
    ProjectStatus, READONLY_FIELDS, SYSTEM_ACTOR,
)
from copejem.models import CompanyRow, MemberRow, ProjectRow


def test_identity_types_wrap_str():
    assert CompanyId("1") == "1"
    assert MemberId("abc") == "abc"
    assert ProjectId("p-1") == "p-1"


def test_entity_kind_values_match_table_names():
    assert EntityKind.COMPANY.value == CompanyRow.__tablename__
    assert EntityKind.MEMBER.value == MemberRow.__tablename__
    assert EntityKind.PROJECT.value == ProjectRow.__tablename__


def test_member_role_values():
    assert {r.value for r in MemberRole} == {
        "Member", "Counselor", "President", "Director", "Trainee",
    }


def test_member_status_has_two_states():
    assert set(MemberStatus) == {MemberStatus.ACTIVE, MemberStatus.INACTIVE}


def test_project_status_serializes_to_string():
    assert ProjectStatus.COMPLETED == "COMPLETED"


def test_readonly_fields():
    assert READONLY_FIELDS == {"id", "created_at", "updated_at", "created_by"}


def test_system_actor():
    assert SYSTEM_ACTOR == "system"
