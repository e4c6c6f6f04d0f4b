"""Task Management API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskApiError → {"success": false, "error": ...}
    - CORS configured from settings (not hardcoded)
    - Schema created on startup before any request is served; failure aborts startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_api.api.error_handlers import register_error_handlers
from task_api.api.routes import health, projects, root, tasks, users
from task_api.config import get_settings
from task_api.infrastructure.database import init_db
from task_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        enforce_foreign_keys=settings.enforce_foreign_keys,
    )
    try:
        await manager.create_schema()
    except Exception:
        logger.critical("Failed to initialize database schema", exc_info=True)
        await manager.dispose()
        raise
    logger.info(f"{settings.app_name} started")
    yield
    await manager.dispose()
    logger.info(f"{settings.app_name} shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(projects.router)
app.include_router(tasks.router)

register_error_handlers(app)
