"""Existence Check — the "check" half of check-then-act.

Invariants:
    - One SELECT by primary key, nothing else
    - Store failure surfaces as DatabaseError("Database error")
    - The answer is only valid at read time: a concurrent delete can land
      between this check and the write that relies on it
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.db.base import Base
from task_api.infrastructure.database import store_operation


async def row_exists(db: AsyncSession, model: type[Base], row_id: int) -> bool:
    async with store_operation(db, "Database error", f"check {model.__tablename__}"):
        result = await db.execute(select(model.id).where(model.id == row_id))
        return result.scalar_one_or_none() is not None
