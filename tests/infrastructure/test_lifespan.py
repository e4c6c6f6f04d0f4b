"""Application lifespan — schema must exist before traffic, failure is fatal."""

import pytest

import task_api.infrastructure.database as db_module
from task_api import main
from task_api.config import get_settings
from task_api.infrastructure.database import DatabaseSessionManager


@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setattr(main, "setup_logging", lambda *args: None)
    original_manager = db_module.db_manager
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
    db_module.db_manager = original_manager


async def test_startup_creates_schema(app_settings, tmp_path):
    async with main.lifespan(main.app):
        manager = db_module.db_manager
        assert manager is not None
        assert await manager.health_check() is True
    assert (tmp_path / "app.db").exists()


async def test_startup_aborts_when_schema_creation_fails(app_settings, monkeypatch):
    async def broken_create_schema(self):
        raise RuntimeError("disk full")

    monkeypatch.setattr(
        DatabaseSessionManager, "create_schema", broken_create_schema,
    )

    with pytest.raises(RuntimeError, match="disk full"):
        async with main.lifespan(main.app):
            pytest.fail("app served traffic without a schema")
