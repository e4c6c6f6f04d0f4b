"""Database Session Manager — async engine, schema initialization and error mapping.

Invariants:
    - One engine per process, created on startup and reused for every request
    - create_schema() is create-if-absent: safe on every startup
    - Every SQLAlchemy exception raised inside store_operation() rolls the
      session back and surfaces as DatabaseError with a generic message
    - Foreign keys are declared but only enforced when enforce_foreign_keys=True

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: generated ids stay readable after commit
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)

from task_api.core.errors import DatabaseError
from task_api.db.base import Base
import task_api.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if url.database in (None, "", ":memory:"):
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class DatabaseSessionManager:
    """Owns the engine, hands out sessions, creates the schema."""

    def __init__(self, database_url: str, enforce_foreign_keys: bool = False):
        _ensure_sqlite_directory(database_url)
        self.engine = create_async_engine(database_url, pool_pre_ping=True)
        if enforce_foreign_keys:
            event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """Create users, projects and tasks tables if they are absent."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(
            "Schema ready: %s", ", ".join(Base.metadata.tables),
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Database error", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Database error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database error", "unknown")
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def store_operation(
    db: AsyncSession, failure_message: str, operation: str,
) -> AsyncGenerator[None, None]:
    """Translate any store failure inside the block into DatabaseError.

    The detailed cause is logged; only failure_message reaches the client.
    """
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"{failure_message}: {e}",
            extra={"error_code": "DATABASE_ERROR", "operation": operation},
        )
        raise DatabaseError(failure_message, operation) from e


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


def get_db_manager() -> DatabaseSessionManager | None:
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
