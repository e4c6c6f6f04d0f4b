"""Service test fixtures — file-backed SQLite per test + FastAPI test client.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - db_manager is swapped for the test manager, so get_db and the readiness
      probe both see the test store
    - A file (not :memory:) database gives each request its own connection,
      which concurrent-request tests rely on
"""

import pytest
from httpx import ASGITransport, AsyncClient

import task_api.infrastructure.database as db_module
from task_api.infrastructure.database import DatabaseSessionManager
from task_api.main import app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}"


@pytest.fixture
async def test_manager(database_url):
    manager = DatabaseSessionManager(database_url)
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
async def client(test_manager):
    """FastAPI test client bound to the per-test store."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def seed_user(client):
    """Create one user through the API and return its id."""
    res = await client.post(
        "/api/users", json={"name": "Ana", "email": "ana@x.com"},
    )
    assert res.status_code == 201
    return res.json()["userId"]


@pytest.fixture
async def seed_project(client, seed_user):
    """Create one project owned by seed_user and return its id."""
    res = await client.post(
        "/api/projects", json={"title": "P1", "user_id": seed_user},
    )
    assert res.status_code == 201
    return res.json()["projectId"]


@pytest.fixture
async def seed_task(client, seed_project):
    res = await client.post(
        "/api/tasks", json={"title": "T1", "project_id": seed_project},
    )
    assert res.status_code == 201
    return res.json()["taskId"]
