"""Domain Types — the User entity and the value objects passed to the user service.

Invariants:
    - User is immutable; updates produce a new instance (dataclasses.replace)
    - UserChanges fields left as None mean "no change"
    - PaginationParams is always normalized before reaching the service
    - PagedResult.has_next is true iff page * limit < total

Design Decisions:
    - NewType for UserId: zero runtime cost, ids stay opaque strings on the wire
      (unknown ids like "nonexistent-id" must yield 404, not a parse error)
    - Frozen dataclasses over ORM models: repositories convert at their edge
"""

from dataclasses import dataclass, field, replace
from typing import Any, NewType

UserId = NewType("UserId", str)


@dataclass(frozen=True)
class User:
    """Field values are kept as received; only their presence is checked."""
    id: UserId
    username: Any
    email: Any
    phone_number: Any


@dataclass(frozen=True)
class UserChanges:
    """Partial update request. Only non-None fields are applied."""
    username: Any = None
    email: Any = None
    phone_number: Any = None

    def apply_to(self, user: User) -> User:
        changes = {
            name: value for name, value in (
                ("username", self.username),
                ("email", self.email),
                ("phone_number", self.phone_number),
            )
            if value is not None
        }
        return replace(user, **changes)


@dataclass(frozen=True)
class PaginationParams:
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PagedResult:
    data: list[User] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    has_next: bool = False
