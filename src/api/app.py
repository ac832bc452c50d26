"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import src.infrastructure.persistence  # noqa: F401  (registers ORM mappers)
from src.api.responses import install_exception_handlers
from src.api.routers import create_api_router
from src.config import Settings, get_settings
from src.infrastructure.database import Base, build_engine, build_session_factory

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        app.state.session_factory = build_session_factory(engine)
        if settings.create_schema:
            logger.info("Creating database schema")
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    install_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app
