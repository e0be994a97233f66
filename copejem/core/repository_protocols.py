"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All storage IO is accessed through these Protocol types
    - Implementations are provided by infrastructure/ via dependency injection
    - Callers depend on RecordStore only, never on which backend is active

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO (file or network)
    - StoreAdapter is the collection-level contract (whole ordered sequence);
      RecordStore is the per-entity capability built on top of it locally,
      or implemented directly with targeted statements remotely
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)


class StoreAdapter(Protocol):
    """Uniform get/put of a named collection as an ordered sequence of records."""
    async def list(self, collection: str) -> list[dict]: ...
    async def replace_all(self, collection: str, records: list[dict]) -> None: ...


class RecordStore(Protocol[R]):
    """Contract for one entity kind's persistence, local or remote."""
    async def list_all(self) -> list[R]: ...
    async def get(self, record_id: str) -> R | None: ...
    async def insert(self, record: R) -> R: ...
    async def replace(self, record: R) -> R: ...
    async def remove(self, record_id: str) -> bool: ...
