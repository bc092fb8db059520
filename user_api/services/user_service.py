"""User Service — owns identity generation, paging math, and the user lifecycle.

Invariants:
    - Ids are generated here (uuid4 strings), never accepted from clients
    - get_all_users expects already-normalized PaginationParams
    - update_user and delete_user report a missing id as None / False, never raise
    - update_user reports None when the user is deleted between read and write
    - Storage failures propagate unchanged to the caller

Design Decisions:
    - Repository injected via constructor: in-memory and SQL stores are
      interchangeable behind UserRepository (ADR: storage selected by config)
    - Partial updates via UserChanges: absent fields are untouched, an empty
      string is a real value
"""

import logging
import uuid

from user_api.core.domain_types import (
    PagedResult, PaginationParams, User, UserChanges, UserId,
)
from user_api.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """User lifecycle operations over a UserRepository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def add_user(
        self, username: str, email: str, phone_number: str,
    ) -> User:
        user = User(
            id=UserId(str(uuid.uuid4())),
            username=username,
            email=email,
            phone_number=phone_number,
        )
        saved = await self._repository.save(user)
        logger.info("User created", extra={"user_id": saved.id})
        return saved

    async def get_all_users(self, params: PaginationParams) -> PagedResult:
        users = await self._repository.list_page(params.offset, params.limit)
        total = await self._repository.count()
        return PagedResult(
            data=users,
            total=total,
            page=params.page,
            limit=params.limit,
            has_next=params.page * params.limit < total,
        )

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def update_user(
        self, user_id: UserId, changes: UserChanges,
    ) -> User | None:
        existing = await self._repository.get_by_id(user_id)
        if existing is None:
            return None
        updated = await self._repository.update(changes.apply_to(existing))
        if updated is None:
            return None
        logger.info("User updated", extra={"user_id": user_id})
        return updated

    async def delete_user(self, user_id: UserId) -> bool:
        deleted = await self._repository.delete(user_id)
        if deleted:
            logger.info("User deleted", extra={"user_id": user_id})
        return deleted
