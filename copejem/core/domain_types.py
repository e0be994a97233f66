"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyId, MemberId, ProjectId wrap str identifiers
    - EntityKind values are the collection/table names
    - All valid states encoded as Enums; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: records serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Any, Mapping, NewType


# ─── Identity Types ──────────────────────────────────────────────

CompanyId = NewType("CompanyId", str)
MemberId = NewType("MemberId", str)
ProjectId = NewType("ProjectId", str)

# field name -> new value, applied as a shallow merge
Patch = Mapping[str, Any]

SYSTEM_ACTOR = "system"


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Entity kinds; the value names the collection (local slot / remote table)."""
    COMPANY = "companies"
    MEMBER = "members"
    PROJECT = "projects"


class MemberRole(str, Enum):
    MEMBER = "Member"
    COUNSELOR = "Counselor"
    PRESIDENT = "President"
    DIRECTOR = "Director"
    TRAINEE = "Trainee"


class MemberStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ProjectStatus(str, Enum):
    """Project lifecycle states."""
    PLANNED = "PLANNED"
    EXECUTING = "EXECUTING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class ProjectType(str, Enum):
    EVENT = "EVENT"
    TRAINING = "TRAINING"
    INSTITUTIONAL_ACTION = "INSTITUTIONAL_ACTION"
    SOCIAL_PROJECT = "SOCIAL_PROJECT"
    EXTERNAL_PARTNERSHIP = "EXTERNAL_PARTNERSHIP"


class TargetAudience(str, Enum):
    YOUNG_ENTREPRENEURS = "YOUNG_ENTREPRENEURS"
    ACIM_MEMBERS = "ACIM_MEMBERS"
    EXTERNAL_PUBLIC = "EXTERNAL_PUBLIC"
    COPEJEM_MEMBERS = "COPEJEM_MEMBERS"
    OTHER = "OTHER"


class PartnerType(str, Enum):
    ACIM = "ACIM"
    SPONSOR = "SPONSOR"
    PARTNER_INSTITUTION = "PARTNER_INSTITUTION"
    SUPPORTING_COMPANY = "SUPPORTING_COMPANY"


class TaskStatus(str, Enum):
    """Status of a single task in a project schedule."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Fields the repository owns; callers never write them directly.
READONLY_FIELDS = frozenset({"id", "created_at", "updated_at", "created_by"})
