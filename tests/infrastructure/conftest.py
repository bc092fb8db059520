"""Infrastructure fixtures — in-memory SQLite engine with the users table.

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, sufficient for
      repository tests (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from user_api.db.base import Base
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.infrastructure.user_repository import SqlUserRepository
import user_api.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def sql_repository(db_manager):
    return SqlUserRepository(db_manager)
