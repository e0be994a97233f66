"""COPEJEM API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CopejemError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage backend chosen once at startup; services live on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - The database pool is only opened when the remote backend is selected
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from copejem.api.error_handlers import register_error_handlers
from copejem.api.routes import auth, companies, health, members, projects
from copejem.config import get_settings
from copejem.infrastructure.database import close_db, init_db
from copejem.infrastructure.observability import setup_logging
from copejem.infrastructure.store_factory import build_record_stores
from copejem.services.container import build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = None
    if settings.storage_backend == "remote":
        db = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    app.state.services = build_services(build_record_stores(settings, db))
    logger.info(f"COPEJEM API started ({settings.storage_backend} storage)")
    yield
    logger.info("COPEJEM API shutting down")
    await close_db()


app = FastAPI(title="COPEJEM API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(companies.router)
app.include_router(members.router)
app.include_router(projects.router)

register_error_handlers(app)
