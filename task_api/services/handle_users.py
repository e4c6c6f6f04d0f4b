"""User Handlers — list, create, update, delete for /api/users.

Invariants:
    - create requires non-empty name and email
    - duplicate email is rejected by the store's unique constraint → 500
    - update overwrites both columns; an omitted field is written as null
    - delete never looks at projects or tasks owned by / assigned to the user
"""

import logging

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.envelope import list_envelope, message_envelope
from task_api.core.errors import ResourceNotFoundError
from task_api.core.validation import require_fields
from task_api.infrastructure.database import store_operation
from task_api.models.user import User
from task_api.schemas.user import UserPayload
from task_api.services.row_exists import row_exists

logger = logging.getLogger(__name__)


class UserHandlers:
    """CRUD handlers for users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> dict:
        """All users, newest first."""
        async with store_operation(self.db, "Failed to get users", "list"):
            result = await self.db.execute(
                select(User).order_by(User.created_at.desc(), User.id.desc()),
            )
            users = result.scalars().all()
        return list_envelope([u.as_dict() for u in users])

    async def create_user(self, payload: UserPayload) -> dict:
        require_fields(
            payload.model_dump(), ["name", "email"],
            "Name and email are required",
        )
        user = User(name=payload.name, email=payload.email)
        async with store_operation(self.db, "Failed to create user", "insert"):
            self.db.add(user)
            await self.db.commit()
        logger.info(
            f"User {user.id} created",
            extra={"entity": "user", "entity_id": user.id},
        )
        return message_envelope("User created successfully", userId=user.id)

    async def update_user(self, user_id: int, payload: UserPayload) -> dict:
        if not await row_exists(self.db, User, user_id):
            raise ResourceNotFoundError("User", user_id)

        async with store_operation(self.db, "Failed to update user", "update"):
            await self.db.execute(
                update(User)
                .where(User.id == user_id)
                .values(name=payload.name, email=payload.email),
            )
            await self.db.commit()
        return message_envelope("User updated successfully")

    async def delete_user(self, user_id: int) -> dict:
        async with store_operation(self.db, "Failed to delete user", "delete"):
            result = await self.db.execute(
                delete(User).where(User.id == user_id),
            )
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("User", user_id)
        logger.info(
            f"User {user_id} deleted",
            extra={"entity": "user", "entity_id": user_id},
        )
        return message_envelope("User deleted successfully")
