"""API Dependencies — process-wide UserService wired from settings.

Invariants:
    - Exactly one UserService per process, created by init_user_service on startup
    - get_user_service fails loudly if startup wiring did not run

Design Decisions:
    - Module-level singleton + FastAPI dependency (same shape as db_manager):
      tests swap it via app.dependency_overrides
    - Repository chosen by settings.user_store; the HTTP layer never knows which
"""

import logging

from user_api.config import Settings
from user_api.infrastructure.database import init_db
from user_api.infrastructure.user_repository import (
    InMemoryUserRepository, SqlUserRepository,
)
from user_api.services.user_service import UserService

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
user_service: UserService | None = None


def init_user_service(settings: Settings) -> UserService:
    global user_service
    if settings.user_store == "database":
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        repository = SqlUserRepository(manager)
    else:
        repository = InMemoryUserRepository()
    user_service = UserService(repository)
    logger.info(f"User service initialized with {settings.user_store} store")
    return user_service


def get_user_service() -> UserService:
    """FastAPI dependency for the user service."""
    if user_service is None:
        raise RuntimeError("User service not initialized")
    return user_service
