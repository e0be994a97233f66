"""Entity Repository: generic CRUD for one entity kind over a RecordStore.

Invariants:
    - create assigns a fresh uuid4 id and stamps created_at/updated_at when the
      record kind has them; callers never supply id or timestamps
    - update is a shallow merge onto the stored snapshot; updated_at re-stamped
    - update / delete of an unknown id raise ResourceNotFoundError (both backends)
    - get_by_id returns None for an unknown id, never raises
    - Required-field and type checks run here (pydantic), raising ValidationFailedError

Design Decisions:
    - Clock and id factory injected: year-based rules and ids are testable
    - Business rules live in subclasses/services; this class stays rule-free
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Generic, TypeVar

from copejem.core.apply_patch import apply_patch, build_record, check_writable_fields
from copejem.core.domain_types import EntityKind, Patch
from copejem.core.errors import ResourceNotFoundError
from copejem.core.repository_protocols import RecordStore
from copejem.schemas.base import RecordModel

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=RecordModel)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    return str(uuid.uuid4())


class EntityRepository(Generic[R]):
    """CRUD for one entity kind; backend-agnostic."""

    def __init__(
        self,
        store: RecordStore[R],
        model: type[R],
        kind: EntityKind,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = new_record_id,
    ):
        self._store = store
        self._model = model
        self.kind = kind
        self._clock = clock
        self._id_factory = id_factory

    @property
    def model(self) -> type[R]:
        return self._model

    def _timestamps(self, now: datetime, creating: bool) -> dict:
        fields = self._model.model_fields
        stamps: dict[str, Any] = {}
        if creating and "created_at" in fields:
            stamps["created_at"] = now
        if "updated_at" in fields:
            stamps["updated_at"] = now
        return stamps

    async def get_all(self) -> list[R]:
        return await self._store.list_all()

    async def get_by_id(self, record_id: str) -> R | None:
        return await self._store.get(record_id)

    async def get_or_raise(self, record_id: str) -> R:
        record = await self._store.get(record_id)
        if record is None:
            raise ResourceNotFoundError(self.kind.value, record_id)
        return record

    async def create(self, fields: Patch) -> R:
        return await self._insert(fields, {})

    async def update(self, record_id: str, patch: Patch) -> R:
        existing = await self.get_or_raise(record_id)
        return await self._replace(existing, patch)

    async def delete(self, record_id: str) -> None:
        if not await self._store.remove(record_id):
            raise ResourceNotFoundError(self.kind.value, record_id)
        logger.info(
            f"Deleted {self.kind.value} record {record_id}",
            extra={"entity_kind": self.kind.value, "entity_id": record_id},
        )

    async def _insert(self, fields: Patch, stamps: dict) -> R:
        """Validate and persist a new record; `stamps` are repository-owned fields."""
        check_writable_fields(self._model, fields)
        data = {
            **fields,
            **stamps,
            **self._timestamps(self._clock(), creating=True),
            "id": self._id_factory(),
        }
        record = build_record(self._model, data)
        await self._store.insert(record)
        logger.info(
            f"Created {self.kind.value} record {record.id}",
            extra={"entity_kind": self.kind.value, "entity_id": record.id},
        )
        return record

    async def _replace(self, existing: R, patch: Patch) -> R:
        updated = apply_patch(
            existing, patch, **self._timestamps(self._clock(), creating=False),
        )
        await self._store.replace(updated)
        return updated
