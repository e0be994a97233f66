"""Local Slot Store: durable key-value slots holding JSON-serialized collections.

Invariants:
    - One slot file per collection: <data_dir>/copejem_<collection>.json
    - Reading a never-initialized slot writes its seed (or []) before returning it;
      this is the only implicit write
    - A seeded slot is never re-seeded, even if it later becomes empty
    - Slot writes are atomic (temp file in the same dir + os.replace)
    - SlotRecordStore keeps insertion order; updates keep the record's position
    - Unknown id on replace raises ResourceNotFoundError

Design Decisions:
    - Plain JSON files over a database: the slot is the unit of persistence, and
      the payload stays readable by hand
    - Read-modify-replace_all for every write: single actor, no locking
    - File IO runs in a worker thread via asyncio.to_thread
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Generic, Mapping, TypeVar

from copejem.core.errors import BackendUnavailableError, ResourceNotFoundError
from copejem.core.repository_protocols import StoreAdapter
from copejem.schemas.base import RecordModel

logger = logging.getLogger(__name__)

SLOT_PREFIX = "copejem_"

R = TypeVar("R", bound=RecordModel)


class JsonSlotAdapter:
    """StoreAdapter over a directory of JSON slot files."""

    def __init__(
        self, data_dir: str | Path, seeds: Mapping[str, list[dict]] | None = None,
    ):
        self.data_dir = Path(data_dir)
        self._seeds = dict(seeds or {})

    def slot_path(self, collection: str) -> Path:
        return self.data_dir / f"{SLOT_PREFIX}{collection}.json"

    async def list(self, collection: str) -> list[dict]:
        path = self.slot_path(collection)
        if not await asyncio.to_thread(path.exists):
            seed = copy.deepcopy(self._seeds.get(collection, []))
            await asyncio.to_thread(self._write, path, seed)
            logger.info(
                f"Seeded slot {path.name} with {len(seed)} record(s)",
                extra={"entity_kind": collection},
            )
            return seed
        return await asyncio.to_thread(self._read, path, collection)

    async def replace_all(self, collection: str, records: list[dict]) -> None:
        await asyncio.to_thread(self._write, self.slot_path(collection), records)

    def _read(self, path: Path, collection: str) -> list[dict]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Slot {path.name} unreadable: {e}")
            raise BackendUnavailableError(f"slot '{collection}' unreadable", "read")
        if not isinstance(payload, list):
            raise BackendUnavailableError(
                f"slot '{collection}' does not hold a list", "read",
            )
        return payload

    def _write(self, path: Path, records: list[dict]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, path)
        except OSError as e:
            logger.error(f"Slot {path.name} write failed: {e}")
            raise BackendUnavailableError(f"slot '{path.stem}' not writable", "write")

    async def health_check(self) -> bool:
        target = self.data_dir if self.data_dir.exists() else self.data_dir.parent
        return os.access(target, os.W_OK)


class SlotRecordStore(Generic[R]):
    """RecordStore for one entity kind, layered on a StoreAdapter."""

    def __init__(self, adapter: StoreAdapter, collection: str, model: type[R]):
        self._adapter = adapter
        self.collection = collection
        self._model = model

    async def list_all(self) -> list[R]:
        rows = await self._adapter.list(self.collection)
        return [self._model.model_validate(row) for row in rows]

    async def get(self, record_id: str) -> R | None:
        for row in await self._adapter.list(self.collection):
            if row.get("id") == record_id:
                return self._model.model_validate(row)
        return None

    async def insert(self, record: R) -> R:
        rows = await self._adapter.list(self.collection)
        rows.append(record.to_slot())
        await self._adapter.replace_all(self.collection, rows)
        return record

    async def replace(self, record: R) -> R:
        rows = await self._adapter.list(self.collection)
        for index, row in enumerate(rows):
            if row.get("id") == record.id:
                rows[index] = record.to_slot()
                await self._adapter.replace_all(self.collection, rows)
                return record
        raise ResourceNotFoundError(self.collection, record.id)

    async def remove(self, record_id: str) -> bool:
        rows = await self._adapter.list(self.collection)
        kept = [row for row in rows if row.get("id") != record_id]
        if len(kept) == len(rows):
            return False
        await self._adapter.replace_all(self.collection, kept)
        return True
