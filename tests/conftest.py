"""Root conftest — shared test configuration."""

import os

# Never touch the default on-disk store from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")
