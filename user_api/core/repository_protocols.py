"""Boundary Protocols — contracts between the user service and its storage.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Repositories speak domain types (User), never ORM rows or dicts
    - list_page returns users in insertion order
    - save inserts a new user; update rewrites an existing one and returns None
      when the id no longer exists, never re-creating it

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations may do IO, the in-memory one simply
      never suspends
"""

from typing import Protocol

from user_api.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for user persistence, implemented by infrastructure."""
    async def save(self, user: User) -> User: ...
    async def update(self, user: User) -> User | None: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def list_page(self, offset: int, limit: int) -> list[User]: ...
    async def count(self) -> int: ...
    async def delete(self, user_id: UserId) -> bool: ...
