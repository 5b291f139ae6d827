"""Model Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the error envelope
    - Auth gate and CORS configured from settings (not hardcoded)
    - Database initialized and schema created on startup via lifespan

Design Decisions:
    - create_app(settings) factory: tests build apps with different secrets,
      the module-level `app` uses get_settings()
    - Lifespan sets up logging, opens the engine and disposes it on shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from model_service import __version__
from model_service.api.error_handlers import register_error_handlers
from model_service.api.middleware import register_middleware
from model_service.api.routes import health, home, models
from model_service.config import Settings, get_settings
from model_service.infrastructure.database import close_db, init_db
from model_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_schema()
    logger.info("Model service started")
    yield
    await close_db()
    logger.info("Model service shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Model Service API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings

    register_middleware(app, settings)

    app.include_router(home.router)
    app.include_router(health.router)
    app.include_router(models.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "model_service.main:app", host=settings.host, port=settings.port,
    )
