"""Database Session Manager — schema creation, error mapping, FK enforcement.

Invariants:
    - create_schema() is idempotent and creates users, projects, tasks
    - store_operation() turns SQLAlchemy errors into DatabaseError(message)
    - enforce_foreign_keys=True turns owner deletion into a store failure
"""

import pytest
from sqlalchemy import inspect, text

from task_api.core.errors import DatabaseError
from task_api.infrastructure.database import DatabaseSessionManager, store_operation
from task_api.schemas.project import ProjectCreate
from task_api.schemas.user import UserPayload
from task_api.services.handle_projects import ProjectHandlers
from task_api.services.handle_users import UserHandlers


@pytest.fixture
async def manager(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    yield m
    await m.dispose()


async def _table_names(manager) -> set[str]:
    async with manager.engine.connect() as conn:
        return set(await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).get_table_names(),
        ))


async def test_create_schema_creates_three_tables(manager):
    await manager.create_schema()
    assert await _table_names(manager) == {"users", "projects", "tasks"}


async def test_create_schema_is_idempotent(manager):
    await manager.create_schema()
    async with manager.session() as db:
        await UserHandlers(db).create_user(
            UserPayload(name="Ana", email="ana@x.com"),
        )

    await manager.create_schema()

    async with manager.session() as db:
        users = await UserHandlers(db).list_users()
    assert users["count"] == 1


async def test_missing_parent_directory_is_created(tmp_path):
    db_path = tmp_path / "nested" / "data" / "tasks.db"
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{db_path}")
    try:
        assert db_path.parent.is_dir()
        await m.create_schema()
        assert db_path.exists()
    finally:
        await m.dispose()


async def test_store_operation_maps_sqlalchemy_errors(manager):
    await manager.create_schema()
    async with manager.session() as db:
        with pytest.raises(DatabaseError) as exc_info:
            async with store_operation(db, "Failed to get widgets", "list"):
                await db.execute(text("SELECT * FROM widgets"))

    err = exc_info.value
    assert err.http_status == 500
    assert err.operation == "list"
    assert err.to_response() == {
        "success": False, "error": "Failed to get widgets",
    }


async def test_list_before_schema_reports_generic_failure(manager):
    async with manager.session() as db:
        with pytest.raises(DatabaseError) as exc_info:
            await UserHandlers(db).list_users()
    assert exc_info.value.message == "Failed to get users"


async def test_health_check_true_for_reachable_store(manager):
    assert await manager.health_check() is True


async def test_health_check_false_for_unopenable_store(tmp_path):
    m = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path}")
    try:
        assert await m.health_check() is False
    finally:
        await m.dispose()


async def test_owner_delete_without_enforcement_orphans_project(manager):
    await manager.create_schema()
    async with manager.session() as db:
        user_id = (await UserHandlers(db).create_user(
            UserPayload(name="Ana", email="ana@x.com"),
        ))["userId"]
        await ProjectHandlers(db).create_project(
            ProjectCreate(title="P1", user_id=user_id),
        )
        await UserHandlers(db).delete_user(user_id)
        projects = await ProjectHandlers(db).list_projects()
    assert projects["data"][0]["user_id"] == user_id


async def test_enforced_foreign_keys_block_owner_delete(tmp_path):
    m = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'fk.db'}", enforce_foreign_keys=True,
    )
    try:
        await m.create_schema()
        async with m.session() as db:
            user_id = (await UserHandlers(db).create_user(
                UserPayload(name="Ana", email="ana@x.com"),
            ))["userId"]
            await ProjectHandlers(db).create_project(
                ProjectCreate(title="P1", user_id=user_id),
            )

        async with m.session() as db:
            with pytest.raises(DatabaseError) as exc_info:
                await UserHandlers(db).delete_user(user_id)
        assert exc_info.value.message == "Failed to delete user"

        async with m.session() as db:
            assert (await UserHandlers(db).list_users())["count"] == 1
    finally:
        await m.dispose()
