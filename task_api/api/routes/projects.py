"""Project Routes — /api/projects."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.infrastructure.database import get_db
from task_api.schemas.project import ProjectCreate, ProjectUpdate
from task_api.services.handle_projects import ProjectHandlers

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
async def list_projects(db: AsyncSession = Depends(get_db)):
    return await ProjectHandlers(db).list_projects()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate | None = None, db: AsyncSession = Depends(get_db),
):
    return await ProjectHandlers(db).create_project(body or ProjectCreate())


@router.put("/{project_id}")
async def update_project(
    project_id: int,
    body: ProjectUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await ProjectHandlers(db).update_project(
        project_id, body or ProjectUpdate(),
    )


@router.delete("/{project_id}")
async def delete_project(project_id: int, db: AsyncSession = Depends(get_db)):
    return await ProjectHandlers(db).delete_project(project_id)
