"""Store Factory: builds the three RecordStores for the configured backend.

Invariants:
    - Both variants expose the same RecordStore capability per entity kind
    - Local: one JsonSlotAdapter shared by all kinds, seeded unless disabled
    - Remote: one DatabaseSessionManager shared by all kinds, never seeded
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from copejem.config import Settings
from copejem.core.domain_types import EntityKind
from copejem.core.repository_protocols import RecordStore
from copejem.core.seed_data import SEEDS
from copejem.infrastructure.database import DatabaseSessionManager
from copejem.infrastructure.slot_store import JsonSlotAdapter, SlotRecordStore
from copejem.infrastructure.sql_store import SqlRecordStore
from copejem.models import CompanyRow, MemberRow, ProjectRow
from copejem.schemas.company import Company
from copejem.schemas.member import Member
from copejem.schemas.project import Project

logger = logging.getLogger(__name__)


@dataclass
class RecordStores:
    """The active backend's stores plus its readiness probe."""
    companies: RecordStore[Company]
    members: RecordStore[Member]
    projects: RecordStore[Project]
    health_check: Callable[[], Awaitable[bool]]
    backend: str


def local_stores(data_dir: Any, seed: bool = True) -> RecordStores:
    adapter = JsonSlotAdapter(data_dir, SEEDS if seed else None)
    return RecordStores(
        companies=SlotRecordStore(adapter, EntityKind.COMPANY.value, Company),
        members=SlotRecordStore(adapter, EntityKind.MEMBER.value, Member),
        projects=SlotRecordStore(adapter, EntityKind.PROJECT.value, Project),
        health_check=adapter.health_check,
        backend="local",
    )


def remote_stores(db: DatabaseSessionManager) -> RecordStores:
    return RecordStores(
        companies=SqlRecordStore(
            db, CompanyRow, Company, (CompanyRow.created_at.desc(),),
        ),
        members=SqlRecordStore(db, MemberRow, Member, (MemberRow.name.asc(),)),
        projects=SqlRecordStore(
            db, ProjectRow, Project, (ProjectRow.created_at.desc(),),
        ),
        health_check=db.health_check,
        backend="remote",
    )


def build_record_stores(
    settings: Settings, db: DatabaseSessionManager | None = None,
) -> RecordStores:
    """Pick the backend named by settings.storage_backend."""
    if settings.storage_backend == "remote":
        if db is None:
            raise RuntimeError("Database not initialized")
        logger.info("Using remote relational storage")
        return remote_stores(db)
    logger.info(f"Using local slot storage at {settings.local_data_dir}")
    return local_stores(settings.local_data_dir, settings.seed_local_data)
