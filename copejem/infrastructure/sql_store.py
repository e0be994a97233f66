"""Remote Record Store: one targeted SQL statement per repository operation.

Invariants:
    - list_all orders by the collection's key (created_at DESC or name ASC)
    - insert / replace / remove touch exactly one row, scoped by id
    - replace of an unknown id raises ResourceNotFoundError
    - Every backend failure surfaces as BackendUnavailableError; no retries
    - Never seeded

Design Decisions:
    - One short session per call: no transaction spans two operations
    - JSON columns receive the JSON-mode dump; scalar columns the python-mode dump
"""

from typing import Generic, TypeVar

from sqlalchemy import JSON, delete, select, update
from sqlalchemy.sql.elements import ColumnElement

from copejem.core.errors import ResourceNotFoundError
from copejem.db.base import Base
from copejem.infrastructure.database import DatabaseSessionManager
from copejem.schemas.base import RecordModel


R = TypeVar("R", bound=RecordModel)


class SqlRecordStore(Generic[R]):
    """RecordStore for one entity kind backed by one relational table."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        row_model: type[Base],
        model: type[R],
        order_by: tuple[ColumnElement, ...],
    ):
        self._db = db
        self._row_model = row_model
        self._model = model
        self._order_by = order_by
        self.collection = row_model.__tablename__
        self._json_columns = {
            c.name for c in row_model.__table__.columns
            if isinstance(c.type, JSON)
        }

    def _to_columns(self, record: R) -> dict:
        native = record.model_dump()
        plain = record.model_dump(mode="json")
        return {
            name: plain[name] if name in self._json_columns else value
            for name, value in native.items()
        }

    def _to_record(self, row) -> R:
        return self._model.model_validate(row, from_attributes=True)

    async def list_all(self) -> list[R]:
        async with self._db.session() as db:
            result = await db.execute(
                select(self._row_model).order_by(*self._order_by),
            )
            return [self._to_record(row) for row in result.scalars().all()]

    async def get(self, record_id: str) -> R | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(self._row_model).where(self._row_model.id == record_id),
            )
            row = result.scalar_one_or_none()
            return self._to_record(row) if row is not None else None

    async def insert(self, record: R) -> R:
        async with self._db.session() as db:
            db.add(self._row_model(**self._to_columns(record)))
            await db.commit()
        return record

    async def replace(self, record: R) -> R:
        columns = self._to_columns(record)
        columns.pop("id")
        async with self._db.session() as db:
            result = await db.execute(
                update(self._row_model)
                .where(self._row_model.id == record.id)
                .values(**columns),
            )
            if result.rowcount == 0:
                await db.rollback()
                raise ResourceNotFoundError(self.collection, record.id)
            await db.commit()
        return record

    async def remove(self, record_id: str) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(self._row_model).where(self._row_model.id == record_id),
            )
            await db.commit()
            return result.rowcount > 0
