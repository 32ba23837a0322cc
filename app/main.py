"""Task Tracker API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskTrackerError to the error envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - create_app() factory: tests and the ASGI server build the same app
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup

Run with::

    uvicorn app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import health, tasks, users
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Task Tracker API started ({settings.environment.value})")
    yield
    logger.info("Task Tracker API shutting down")
    await close_db()


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Task Tracker API", version="1.0.0", lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.middleware("http")(log_requests)

    application.include_router(health.router)
    application.include_router(users.router)
    application.include_router(tasks.router)

    register_error_handlers(application)
    return application


app = create_app()
