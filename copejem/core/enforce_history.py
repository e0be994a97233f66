"""Historical Immutability: projects from past years are institutional memory.

Invariants:
    - All functions are PURE: the current year is passed in, evaluated by the caller
      at call time (never at data-creation time)
    - year < current_year  => delete is rejected, update is allowed but audited
    - year >= current_year => no restriction
    - Return the error on violation, None on success

Design Decisions:
    - Update is deliberately weaker than delete: audited, not blocked
"""

from copejem.core.domain_types import ProjectId
from copejem.core.errors import ImmutableRecordError
from copejem.schemas.project import Project


def is_institutional_record(year: int, current_year: int) -> bool:
    """True when a project year is strictly before the current calendar year."""
    return year < current_year


def check_project_delete(
    project: Project, current_year: int,
) -> ImmutableRecordError | None:
    """Rule: past-year projects can never be deleted."""
    if is_institutional_record(project.year, current_year):
        return ImmutableRecordError(ProjectId(project.id), project.year)
    return None


def needs_update_audit(project: Project, current_year: int) -> bool:
    """Rule: edits to past-year projects go through but must be audited."""
    return is_institutional_record(project.year, current_year)
