"""Async SQLAlchemy engine, session factory, and declarative base.

The application builds one engine per process in its lifespan (see
src/api/app.py) and keeps the session factory on app.state.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.config import Settings

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
]


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the given settings."""
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""
