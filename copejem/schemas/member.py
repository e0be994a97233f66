"""Member Schemas: stored record plus create/update request bodies.

Invariants:
    - company_name is a denormalized copy of the referenced Company's name
    - password is stored in plaintext (known defect, kept for compatibility)
    - Legacy records with a boolean `active` and no `status` are migrated on read
"""

from pydantic import BaseModel, Field, model_validator

from copejem.core.domain_types import MemberRole, MemberStatus
from copejem.schemas.base import RecordModel
from copejem.schemas.company import CompanyCreate


class Member(RecordModel):
    """Member record."""
    name: str = Field(min_length=1, max_length=200)
    company_id: str | None = Field(None, max_length=36)
    company_name: str = Field("", max_length=200)
    role: MemberRole = MemberRole.MEMBER
    email: str = Field(min_length=1, max_length=320)
    phone: str | None = Field(None, max_length=40)
    tax_id: str | None = Field(None, max_length=32)
    password: str | None = Field(None, max_length=200)
    is_admin: bool = False
    status: MemberStatus = MemberStatus.ACTIVE
    admission_year: int
    exit_year: int | None = None
    avatar_url: str | None = Field(None, max_length=500)

    @model_validator(mode="before")
    @classmethod
    def migrate_legacy_status(cls, data):
        """Older payloads stored `active: bool` instead of `status`."""
        if isinstance(data, dict) and "status" not in data and "active" in data:
            data = dict(data)
            active = data.pop("active")
            data["status"] = (
                MemberStatus.ACTIVE if active else MemberStatus.INACTIVE
            )
        return data

    def public(self) -> dict:
        """JSON payload safe to hand to clients (no credential)."""
        return self.model_dump(mode="json", exclude={"password"})


class MemberCreate(BaseModel):
    """Member form submission. new_company triggers inline company creation."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=1)
    company_id: str | None = None
    role: MemberRole = MemberRole.MEMBER
    phone: str | None = None
    tax_id: str | None = None
    is_admin: bool = False
    status: MemberStatus = MemberStatus.ACTIVE
    admission_year: int = Field(ge=1900, le=2200)
    exit_year: int | None = Field(None, ge=1900, le=2200)
    avatar_url: str | None = None
    new_company: CompanyCreate | None = None


class MemberUpdate(BaseModel):
    """Partial member update; a missing or empty password keeps the stored one."""
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, min_length=3, max_length=320)
    password: str | None = None
    company_id: str | None = None
    role: MemberRole | None = None
    phone: str | None = None
    tax_id: str | None = None
    is_admin: bool | None = None
    status: MemberStatus | None = None
    admission_year: int | None = Field(None, ge=1900, le=2200)
    exit_year: int | None = Field(None, ge=1900, le=2200)
    avatar_url: str | None = None
    new_company: CompanyCreate | None = None
