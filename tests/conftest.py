"""Root conftest — shared test configuration."""

import os

# Tests never reach a real database or pick up a developer's .env store choice
os.environ.setdefault("USER_STORE", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
