"""Task Routes — /api/tasks."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.infrastructure.database import get_db
from task_api.schemas.task import TaskCreate, TaskUpdate
from task_api.services.handle_tasks import TaskHandlers

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("")
async def list_tasks(db: AsyncSession = Depends(get_db)):
    return await TaskHandlers(db).list_tasks()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskCreate | None = None, db: AsyncSession = Depends(get_db),
):
    return await TaskHandlers(db).create_task(body or TaskCreate())


@router.put("/{task_id}")
async def update_task(
    task_id: int,
    body: TaskUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await TaskHandlers(db).update_task(task_id, body or TaskUpdate())


@router.delete("/{task_id}")
async def delete_task(task_id: int, db: AsyncSession = Depends(get_db)):
    return await TaskHandlers(db).delete_task(task_id)
