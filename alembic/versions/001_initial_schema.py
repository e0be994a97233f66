"""Initial schema: companies, members, projects.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("tax_id", sa.String(32), nullable=True),
        sa.Column("industry", sa.String(120), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_companies_created_at", "companies", ["created_at"])

    op.create_table(
        "members",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("company_id", sa.String(36), nullable=True),
        sa.Column("company_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.Column("tax_id", sa.String(32), nullable=True),
        sa.Column("password", sa.String(200), nullable=True),
        sa.Column("is_admin", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("status", sa.String(10), nullable=False, server_default="active"),
        sa.Column("admission_year", sa.Integer, nullable=False),
        sa.Column("exit_year", sa.Integer, nullable=True),
        sa.Column("avatar_url", sa.String(500), nullable=True),
    )
    op.create_index("ix_members_name", "members", ["name"])
    op.create_index("ix_members_email", "members", ["email"])
    op.create_index("ix_members_tax_id", "members", ["tax_id"])

    op.create_table(
        "projects",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("name", sa.String(300), nullable=False),
        sa.Column("coordinator_id", sa.String(36), nullable=False, server_default=""),
        sa.Column("coordinator_name", sa.String(200), nullable=False),
        sa.Column("event_date", sa.Date, nullable=True),
        sa.Column("planning_start_date", sa.Date, nullable=True),
        sa.Column("planning_end_date", sa.Date, nullable=True),
        sa.Column("team_members", sa.JSON, nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("target_audience", sa.JSON, nullable=False),
        sa.Column("target_audience_other", sa.String(300), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("partners", sa.JSON, nullable=False),
        sa.Column("results", sa.JSON, nullable=True),
        sa.Column("schedule", sa.JSON, nullable=True),
        sa.Column("sponsors", sa.JSON, nullable=True),
        sa.Column("budget_planned", sa.Float, nullable=True),
        sa.Column("budget_reached", sa.Float, nullable=True),
        sa.Column("images", sa.JSON, nullable=True),
        sa.Column("files", sa.JSON, nullable=True),
        sa.Column("institutional_observations", sa.Text, nullable=True),
        sa.Column("lessons_learned", sa.Text, nullable=True),
        sa.Column("created_by", sa.String(36), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_projects_year", "projects", ["year"])
    op.create_index("ix_projects_created_at", "projects", ["created_at"])


def downgrade() -> None:
    op.drop_table("projects")
    op.drop_table("members")
    op.drop_table("companies")
