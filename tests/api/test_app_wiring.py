"""App wiring — user service initialization, lifespan, and health checks."""

import pytest

import user_api.api.dependencies as deps
import user_api.infrastructure.database as db_module
from user_api.config import Settings
from user_api.infrastructure.user_repository import (
    InMemoryUserRepository, SqlUserRepository,
)
from user_api.main import app


@pytest.fixture(autouse=True)
def _isolate_singletons(monkeypatch):
    monkeypatch.setattr(deps, "user_service", None)
    monkeypatch.setattr(db_module, "db_manager", None)


def test_get_user_service_requires_initialization():
    with pytest.raises(RuntimeError, match="not initialized"):
        deps.get_user_service()


def test_memory_store_uses_in_memory_repository():
    service = deps.init_user_service(Settings(user_store="memory"))
    assert deps.get_user_service() is service
    assert isinstance(service._repository, InMemoryUserRepository)


async def test_database_store_uses_sql_repository():
    service = deps.init_user_service(Settings(
        user_store="database",
        database_url="sqlite+aiosqlite:///:memory:",
    ))
    assert isinstance(service._repository, SqlUserRepository)
    assert db_module.db_manager is not None
    await db_module.close_db()
    assert db_module.db_manager is None


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


async def test_lifespan_initializes_user_service(monkeypatch):
    monkeypatch.setattr("user_api.main.setup_logging", lambda *a: None)
    async with app.router.lifespan_context(app):
        assert deps.get_user_service() is not None


async def test_health_check(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_memory_store(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"] == {"store": "memory"}
