"""Work Hours API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WorkHoursError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - On startup: logging, database, optional schema creation, default group bootstrap
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from workhours import __version__
from workhours.api.error_handlers import register_error_handlers
from workhours.api.routes import export, groups, health, rounds, status
from workhours.config import get_settings
from workhours.infrastructure.database import init_db
from workhours.infrastructure.observability import setup_logging
from workhours.services.group_registry import GroupRegistry
from workhours.services.round_store import RoundStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    async with manager.session() as db:
        default_group = await GroupRegistry(RoundStore(db)).ensure_default_group()
    logger.info(
        f"Work Hours API started (default group '{default_group.name}')",
        extra={"group_id": default_group.id},
    )
    yield
    logger.info("Work Hours API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Work Hours API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(status.router)
app.include_router(rounds.router)
app.include_router(groups.router)
app.include_router(export.router)

register_error_handlers(app)
