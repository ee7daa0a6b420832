"""
Product Catalog - FastAPI application factory
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from sqlalchemy.engine import Engine

from catalog.infrastructure import bootstrap
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.database import create_tables
from catalog.infrastructure.web.errors import register_error_handlers
from catalog.infrastructure.web.routes import router
from catalog.infrastructure.web.schemas import HealthResponse

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the application around *engine* (the configured one by default)."""
    settings = settings or get_settings()
    engine = engine or bootstrap.engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.service_name}")
        logger.info(f"Environment: {settings.environment}")
        if settings.create_schema:
            try:
                create_tables(engine)
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")
                raise
        logger.info(f"{settings.service_name} started successfully")

        yield

        logger.info(f"Shutting down {settings.service_name}")

    app = FastAPI(
        title="Product Catalog",
        description="Product categories, name checks, registration and search",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.uow_factory = bootstrap.unit_of_work_factory(engine)

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Liveness probe"""
        return HealthResponse(status="healthy", service=settings.service_name)

    return app
