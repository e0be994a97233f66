"""Project ORM: one row per Project record.

Invariants:
    - year indexed: the institutional-memory rule and list filters key on it
    - Nested collections (team, partners, schedule, sponsors, results, assets)
      are JSON columns holding the JSON-mode dump of the sub-records

Design Decisions:
    - JSON columns over child tables: sub-records are always read and written
      with their project, never queried on their own
"""

from datetime import date, datetime

from sqlalchemy import String, Text, Integer, Float, Date, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from copejem.db.base import Base


class ProjectRow(Base):
    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    coordinator_id: Mapped[str] = mapped_column(
        String(36), nullable=False, default="",
    )
    coordinator_name: Mapped[str] = mapped_column(String(200), nullable=False)

    event_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    planning_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    planning_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    team_members: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    target_audience: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    target_audience_other: Mapped[str | None] = mapped_column(
        String(300), nullable=True,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)

    partners: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    results: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    schedule: Mapped[list | None] = mapped_column(JSON, nullable=True)
    sponsors: Mapped[list | None] = mapped_column(JSON, nullable=True)

    budget_planned: Mapped[float | None] = mapped_column(Float, nullable=True)
    budget_reached: Mapped[float | None] = mapped_column(Float, nullable=True)

    images: Mapped[list | None] = mapped_column(JSON, nullable=True)
    files: Mapped[list | None] = mapped_column(JSON, nullable=True)

    institutional_observations: Mapped[str | None] = mapped_column(
        Text, nullable=True,
    )
    lessons_learned: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_by: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
