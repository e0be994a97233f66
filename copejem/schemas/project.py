"""Project Schemas: stored record, nested sub-records, and request bodies.

Invariants:
    - team_members holds member names by value, not ids
    - coordinator_name is a denormalized copy of the coordinator Member's name
    - created_by / created_at / updated_at are stamped by the repository
    - schedule order is preserved exactly as written
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from copejem.core.domain_types import (
    PartnerType, ProjectStatus, ProjectType, TargetAudience, TaskStatus,
)
from copejem.schemas.base import RecordModel, SubRecord


class ProjectPartner(SubRecord):
    name: str
    type: PartnerType


class ProjectResults(SubRecord):
    """Outcome figures, filled once the project has run."""
    participants_count: int | None = None
    estimated_reach: int | None = None
    impact_reached: int | None = None
    satisfaction_score: float | None = None
    satisfaction_feedback: str | None = None


class ProjectTask(SubRecord):
    id: str
    title: str
    responsible: str  # name taken from team_members
    start_date: date | None = None
    end_date: date | None = None
    status: TaskStatus = TaskStatus.PENDING


class ProjectSponsor(SubRecord):
    id: str
    name: str
    contact: str = ""
    value: float = 0.0
    observation: str = ""


class ProjectFile(SubRecord):
    name: str
    url: str


class Project(RecordModel):
    """Project record; past-year projects are institutional memory."""
    year: int
    name: str = Field(min_length=1, max_length=300)
    coordinator_id: str = Field("", max_length=36)
    coordinator_name: str = Field(min_length=1, max_length=200)

    event_date: date | None = None
    planning_start_date: date | None = None
    planning_end_date: date | None = None

    team_members: list[str] = Field(default_factory=list)
    description: str = ""

    target_audience: list[TargetAudience] = Field(default_factory=list)
    target_audience_other: str | None = Field(None, max_length=300)

    status: ProjectStatus = ProjectStatus.PLANNED
    type: ProjectType = ProjectType.EVENT

    partners: list[ProjectPartner] = Field(default_factory=list)
    results: ProjectResults | None = None
    schedule: list[ProjectTask] | None = None
    sponsors: list[ProjectSponsor] | None = None

    budget_planned: float | None = None
    budget_reached: float | None = None

    images: list[str] | None = None
    files: list[ProjectFile] | None = None

    institutional_observations: str | None = None
    lessons_learned: str | None = None

    created_by: str = Field(max_length=36)
    created_at: datetime
    updated_at: datetime


class ProjectCreate(BaseModel):
    year: int = Field(ge=1900, le=2200)
    name: str = Field(min_length=1, max_length=300)
    coordinator_id: str = ""
    coordinator_name: str = ""
    event_date: date | None = None
    planning_start_date: date | None = None
    planning_end_date: date | None = None
    team_members: list[str] = Field(default_factory=list)
    description: str = ""
    target_audience: list[TargetAudience] = Field(default_factory=list)
    target_audience_other: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNED
    type: ProjectType = ProjectType.EVENT
    partners: list[ProjectPartner] = Field(default_factory=list)
    results: ProjectResults | None = None
    schedule: list[ProjectTask] | None = None
    sponsors: list[ProjectSponsor] | None = None
    budget_planned: float | None = None
    budget_reached: float | None = None
    images: list[str] | None = None
    files: list[ProjectFile] | None = None
    institutional_observations: str | None = None
    lessons_learned: str | None = None


class ProjectUpdate(BaseModel):
    """Partial project update; each sent field replaces the stored one whole."""
    year: int | None = Field(None, ge=1900, le=2200)
    name: str | None = Field(None, min_length=1, max_length=300)
    coordinator_id: str | None = None
    coordinator_name: str | None = None
    event_date: date | None = None
    planning_start_date: date | None = None
    planning_end_date: date | None = None
    team_members: list[str] | None = None
    description: str | None = None
    target_audience: list[TargetAudience] | None = None
    target_audience_other: str | None = None
    status: ProjectStatus | None = None
    type: ProjectType | None = None
    partners: list[ProjectPartner] | None = None
    results: ProjectResults | None = None
    schedule: list[ProjectTask] | None = None
    sponsors: list[ProjectSponsor] | None = None
    budget_planned: float | None = None
    budget_reached: float | None = None
    images: list[str] | None = None
    files: list[ProjectFile] | None = None
    institutional_observations: str | None = None
    lessons_learned: str | None = None
