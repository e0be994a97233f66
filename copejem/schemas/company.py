"""Company Schemas: stored record plus create/update request bodies.

Invariants:
    - name is required and non-blank; uniqueness is not enforced
    - created_at is stamped by the repository, never by callers
"""

from datetime import datetime

from pydantic import BaseModel, Field

from copejem.schemas.base import RecordModel


class Company(RecordModel):
    """Company record."""
    name: str = Field(min_length=1, max_length=200)
    tax_id: str | None = Field(None, max_length=32)
    industry: str | None = Field(None, max_length=120)
    website: str | None = Field(None, max_length=500)
    created_at: datetime


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    tax_id: str | None = None
    industry: str | None = None
    website: str | None = None


class CompanyUpdate(BaseModel):
    """Partial update; only fields explicitly sent become part of the patch."""
    name: str | None = Field(None, min_length=1, max_length=200)
    tax_id: str | None = None
    industry: str | None = None
    website: str | None = None
