"""User Repositories — in-memory and SQLAlchemy implementations of UserRepository.

Invariants:
    - Both implementations return domain User objects, never rows
    - list_page preserves creation order (dict insertion / seq)
    - save only inserts; update only rewrites an existing user and returns None
      when the id is gone, so a concurrent delete is never undone
    - delete returns False for an unknown id instead of raising
    - SQL failures surface as DatabaseError via DatabaseSessionManager

Design Decisions:
    - In-memory store is the default: zero setup, matches single-process uvicorn
      (ADR: state lost on restart, acceptable without user_store=database)
    - In-memory mutations never await: each call is atomic on the event loop
    - One AsyncSession per SQL operation: no session outlives a request
    - update as a single UPDATE ... WHERE id: the existence check and the write
      are one statement
    - Text columns: non-string field values are stored as their JSON text
"""

import json
from typing import Any

from sqlalchemy import delete, func, select, update

from user_api.core.domain_types import User, UserId
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.models.user import UserRecord


class InMemoryUserRepository:
    """Dict-backed store, insertion-ordered."""

    def __init__(self):
        self._users: dict[UserId, User] = {}

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User | None:
        if user.id not in self._users:
            return None
        self._users[user.id] = user
        return user

    async def get_by_id(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)

    async def list_page(self, offset: int, limit: int) -> list[User]:
        return list(self._users.values())[offset:offset + limit]

    async def count(self) -> int:
        return len(self._users)

    async def delete(self, user_id: UserId) -> bool:
        return self._users.pop(user_id, None) is not None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def _columns(user: User) -> dict[str, str]:
    return {
        "username": _text(user.username),
        "email": _text(user.email),
        "phone_number": _text(user.phone_number),
    }


def _to_domain(record: UserRecord) -> User:
    return User(
        id=UserId(record.id),
        username=record.username,
        email=record.email,
        phone_number=record.phone_number,
    )


class SqlUserRepository:
    """SQLAlchemy-backed store over the users table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def save(self, user: User) -> User:
        async with self._db.session() as session:
            record = UserRecord(id=user.id, **_columns(user))
            session.add(record)
            await session.commit()
            return _to_domain(record)

    async def update(self, user: User) -> User | None:
        async with self._db.session() as session:
            result = await session.execute(
                update(UserRecord)
                .where(UserRecord.id == user.id)
                .values(**_columns(user)),
            )
            await session.commit()
            if result.rowcount == 0:
                return None
            return User(id=user.id, **_columns(user))

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(UserRecord).where(UserRecord.id == user_id),
            )
            record = result.scalar_one_or_none()
            return _to_domain(record) if record else None

    async def list_page(self, offset: int, limit: int) -> list[User]:
        async with self._db.session() as session:
            result = await session.execute(
                select(UserRecord)
                .order_by(UserRecord.seq)
                .offset(offset)
                .limit(limit),
            )
            return [_to_domain(r) for r in result.scalars().all()]

    async def count(self) -> int:
        async with self._db.session() as session:
            result = await session.execute(
                select(func.count()).select_from(UserRecord),
            )
            return result.scalar_one()

    async def delete(self, user_id: UserId) -> bool:
        async with self._db.session() as session:
            result = await session.execute(
                delete(UserRecord).where(UserRecord.id == user_id),
            )
            await session.commit()
            return result.rowcount > 0
