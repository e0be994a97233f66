"""List Filters: search and facet helpers behind the list screens.

Invariants:
    - Filters never reorder; they keep the backend's collection order
    - Text search is case-insensitive over names/emails; tax ids match by substring
    - None / "" for a facet means "all"
"""

from typing import Iterable

from copejem.schemas.company import Company
from copejem.schemas.member import Member
from copejem.schemas.project import Project


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle.lower() in haystack.lower()


def filter_projects(
    projects: Iterable[Project], year: int | None = None, search: str = "",
) -> list[Project]:
    return [
        p for p in projects
        if (year is None or p.year == year)
        and (not search or _contains(p.name, search) or _contains(p.coordinator_name, search))
    ]


def project_years(projects: Iterable[Project], current_year: int) -> list[int]:
    """Distinct project years, newest first; the current year is always offered."""
    years = {p.year for p in projects}
    years.add(current_year)
    return sorted(years, reverse=True)


def filter_members(
    members: Iterable[Member],
    search: str = "",
    company_id: str | None = None,
    status: str | None = None,
) -> list[Member]:
    return [
        m for m in members
        if (not search or _contains(m.name, search) or _contains(m.email, search))
        and (not company_id or m.company_id == company_id)
        and (not status or m.status == status)
    ]


def filter_companies(
    companies: Iterable[Company], search: str = "", industry: str | None = None,
) -> list[Company]:
    return [
        c for c in companies
        if (not search or _contains(c.name, search) or (c.tax_id and search in c.tax_id))
        and (not industry or c.industry == industry)
    ]


def list_industries(companies: Iterable[Company]) -> list[str]:
    """Distinct non-empty industries in first-seen order."""
    seen: dict[str, None] = {}
    for c in companies:
        if c.industry:
            seen.setdefault(c.industry, None)
    return list(seen)
