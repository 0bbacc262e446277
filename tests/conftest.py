"""Shared fixtures: in-memory SQLite database and a zero-delay fallback store."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from taskboard.db.database import Base

# All tables must be imported so Base.metadata knows about them
from taskboard.db.tables import NoteRow, TaskRow, UserRow  # noqa: F401
from taskboard.sources.memory import MemoryDataSource


@pytest_asyncio.fixture
async def db_session():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def memory_source():
    """Fallback store seeded with the demo dataset, without simulated latency."""
    return MemoryDataSource(delay_ms=0)
