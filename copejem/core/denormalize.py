"""Denormalized Fields: cached copies of another entity's attributes.

Invariants:
    - company_name always mirrors the referenced Company's current name
    - No company reference => company_id None and company_name ""
    - coordinator_name mirrors the coordinator Member's name when resolvable
    - All functions are PURE; lookups happen in the service layer
    - A generated avatar follows the member name; an uploaded one never changes on rename
"""

from urllib.parse import quote

from copejem.schemas.company import Company
from copejem.schemas.member import Member

AVATAR_BASE_URL = "https://ui-avatars.com/api/"


def company_link_fields(company: Company | None) -> dict:
    """Member fields describing a (possibly absent) company link."""
    if company is None:
        return {"company_id": None, "company_name": ""}
    return {"company_id": company.id, "company_name": company.name}


def coordinator_fields(coordinator: Member) -> dict:
    return {"coordinator_id": coordinator.id, "coordinator_name": coordinator.name}


def default_avatar_url(name: str) -> str:
    """Generated initials avatar for members without a picture.

    The name is cut to 32 characters so the quoted URL fits the avatar column.
    """
    return f"{AVATAR_BASE_URL}?name={quote(name[:32])}&background=random"


def is_generated_avatar(url: str | None) -> bool:
    return url is not None and url.startswith(AVATAR_BASE_URL)
