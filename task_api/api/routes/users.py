"""User Routes — /api/users."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.infrastructure.database import get_db
from task_api.schemas.user import UserPayload
from task_api.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).list_users()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserPayload | None = None, db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).create_user(body or UserPayload())


@router.put("/{user_id}")
async def update_user(
    user_id: int,
    body: UserPayload | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await UserHandlers(db).update_user(user_id, body or UserPayload())


@router.delete("/{user_id}")
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    return await UserHandlers(db).delete_user(user_id)
