"""Root conftest: shared test configuration and storage fixtures.

Invariants:
    - Tests never touch a real database or the working directory's data/
    - record_stores runs every dependent test once per backend (local, remote)
    - The clock is deterministic and strictly increasing (1s per reading)

Design Decisions:
    - SQLite in-memory for the remote backend: fast, no external dependency,
      PostgreSQL-specific features are not exercised here
"""

import os

os.environ.setdefault("STORAGE_BACKEND", "local")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone

import pytest

from copejem.db.base import Base
from copejem.infrastructure.database import DatabaseSessionManager
from copejem.infrastructure.store_factory import local_stores, remote_stores
from copejem.services.container import build_services


class FakeClock:
    """Callable clock; each reading advances one second."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now

    def jump_to_year(self, year: int) -> None:
        self.now = self.now.replace(year=year)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
async def sql_db():
    """DatabaseSessionManager over a fresh in-memory SQLite schema."""
    db = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest.fixture(params=["local", "remote"])
async def record_stores(request, tmp_path):
    if request.param == "local":
        yield local_stores(tmp_path / "data", seed=False)
        return
    db = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield remote_stores(db)
    await db.dispose()


@pytest.fixture
def services(record_stores, clock):
    return build_services(record_stores, clock)
