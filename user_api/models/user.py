"""User ORM — persistence row for the SQL-backed user repository.

Invariants:
    - seq is the autoincrement primary key and the only list ordering key
    - id is the service-generated UUID string (unique, never server-generated)
    - username, email, phone_number are non-nullable text

Design Decisions:
    - String(36) id over native UUID: ids stay opaque strings end to end, and
      lookups by malformed ids simply miss instead of failing a cast
    - Integer seq over created_at ordering: rows created in the same clock tick
      still list in insertion order
    - No unique constraints on user fields: duplicate detection is not part of the contract
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from user_api.db.base import Base


class UserRecord(Base):
    """Row in the users table."""
    __tablename__ = "users"

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, index=True,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
