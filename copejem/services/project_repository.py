"""Project Repository: CRUD plus the institutional-memory rules.

Invariants:
    - delete of a project with year < current year raises ImmutableRecordError
      and leaves the collection untouched
    - update of such a project is applied AND logged as an audit WARNING
    - The current year is read from the clock at call time
    - created_by is the acting member's id, or "system" without a session
    - coordinator_name is re-synced from the coordinator Member when resolvable
"""

import logging

from copejem.core.denormalize import coordinator_fields
from copejem.core.domain_types import EntityKind, Patch, SYSTEM_ACTOR
from copejem.core.enforce_history import check_project_delete, needs_update_audit
from copejem.core.repository_protocols import RecordStore
from copejem.core.session_context import SessionContext
from copejem.schemas.member import Member
from copejem.schemas.project import Project
from copejem.services.entity_repository import (
    Clock, EntityRepository, new_record_id, utc_now,
)

logger = logging.getLogger(__name__)


def _actor_id(ctx: SessionContext | None) -> str:
    return ctx.user_id if ctx else SYSTEM_ACTOR


class ProjectRepository(EntityRepository[Project]):
    """Projects: past-year records are permanent institutional memory."""

    def __init__(
        self,
        store: RecordStore[Project],
        members: EntityRepository[Member] | None = None,
        clock: Clock = utc_now,
        id_factory=new_record_id,
    ):
        super().__init__(store, Project, EntityKind.PROJECT, clock, id_factory)
        self._members = members

    async def create(self, fields: Patch, ctx: SessionContext | None = None) -> Project:
        fields = await self._sync_coordinator(fields)
        return await self._insert(fields, {"created_by": _actor_id(ctx)})

    async def update(
        self, record_id: str, patch: Patch, ctx: SessionContext | None = None,
    ) -> Project:
        existing = await self.get_or_raise(record_id)
        patch = await self._sync_coordinator(patch)
        if needs_update_audit(existing, self._clock().year):
            logger.warning(
                f"Editing past-year project {existing.id} ({existing.year}); "
                "logging this action for audit",
                extra={
                    "audit": "past_year_update",
                    "entity_kind": self.kind.value,
                    "entity_id": existing.id,
                    "year": existing.year,
                    "actor_id": _actor_id(ctx),
                },
            )
        return await self._replace(existing, patch)

    async def delete(self, record_id: str) -> None:
        existing = await self.get_or_raise(record_id)
        error = check_project_delete(existing, self._clock().year)
        if error:
            logger.warning(
                f"Rejected delete of past-year project {existing.id}",
                extra={
                    "error_code": error.code,
                    "entity_kind": self.kind.value,
                    "entity_id": existing.id,
                    "year": existing.year,
                },
            )
            raise error
        await super().delete(record_id)

    async def _sync_coordinator(self, fields: Patch) -> dict:
        fields = dict(fields)
        coordinator_id = fields.get("coordinator_id")
        if coordinator_id and self._members is not None:
            coordinator = await self._members.get_by_id(coordinator_id)
            if coordinator is not None:
                fields.update(coordinator_fields(coordinator))
        return fields
