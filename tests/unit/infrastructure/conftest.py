"""Shared fixtures: a throwaway SQLite database per test (aiosqlite)."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

import src.infrastructure.persistence  # noqa: F401 (registers all mappers)
from src.infrastructure.database import Base, build_session_factory
from src.infrastructure.persistence.models.fruits import Fruit


@pytest.fixture
async def session(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with build_session_factory(engine)() as db:
        yield db
    await engine.dispose()


@pytest.fixture
async def fruits(session):
    rows = [Fruit(name=name) for name in ("banana", "apple", "Apricot", "cherry")]
    session.add_all(rows)
    await session.flush()
    return rows
