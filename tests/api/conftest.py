"""API test fixtures — fresh in-memory UserService + FastAPI test client.

Invariants:
    - Every test gets its own UserService over an empty InMemoryUserRepository
    - get_user_service dependency overridden to return that service
    - Overrides cleared after each test

Design Decisions:
    - Dependency override over patching the singleton: lifespan never runs under
      ASGITransport, so startup wiring is bypassed entirely
    - Failures injected by monkeypatching service methods (see failing_service)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.api.dependencies import get_user_service
from user_api.infrastructure.user_repository import InMemoryUserRepository
from user_api.main import app
from user_api.services.user_service import UserService


@pytest.fixture
def user_service():
    return UserService(InMemoryUserRepository())


@pytest.fixture
async def client(user_service):
    """FastAPI test client with the user service overridden."""
    app.dependency_overrides[get_user_service] = lambda: user_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def failing_service(user_service, monkeypatch):
    """Make one service method raise. Usage: failing_service("add_user", exc)."""

    def _fail(method: str, exc: Exception):
        async def _raise(*args, **kwargs):
            raise exc

        monkeypatch.setattr(user_service, method, _raise)

    return _fail


@pytest.fixture
async def test_user(user_service):
    return await user_service.add_user(
        "testuser", "test@example.com", "1234567890",
    )
