"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Imported here so Base.metadata is complete before create_all / autogenerate
"""

from user_api.models.user import UserRecord  # noqa: F401
