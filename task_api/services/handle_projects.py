"""Project Handlers — list, create, update, delete for /api/projects.

Invariants:
    - create requires title and user_id, and the user must exist at check time
    - list left-joins the owner: a deleted owner yields owner_name=None, not an error
    - update never changes user_id (owner fixed at creation)
    - delete leaves the project's tasks in place

Design Decisions:
    - Owner check is a separate SELECT before the INSERT (check-then-act), so a
      missing owner is reported as 404 "User not found" rather than a store error
"""

import logging

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.envelope import list_envelope, message_envelope
from task_api.core.errors import ResourceNotFoundError
from task_api.core.validation import require_fields
from task_api.infrastructure.database import store_operation
from task_api.models.project import Project
from task_api.models.user import User
from task_api.schemas.project import ProjectCreate, ProjectUpdate
from task_api.services.row_exists import row_exists

logger = logging.getLogger(__name__)


class ProjectHandlers:
    """CRUD handlers for projects."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_projects(self) -> dict:
        """All projects with owner_name, newest first."""
        query = (
            select(Project, User.name.label("owner_name"))
            .outerjoin(User, Project.user_id == User.id)
            .order_by(Project.created_at.desc(), Project.id.desc())
        )
        async with store_operation(self.db, "Failed to get projects", "list"):
            rows = (await self.db.execute(query)).all()
        return list_envelope([
            {**project.as_dict(), "owner_name": owner_name}
            for project, owner_name in rows
        ])

    async def create_project(self, payload: ProjectCreate) -> dict:
        require_fields(
            payload.model_dump(), ["title", "user_id"],
            "Title and user_id are required",
        )
        if not await row_exists(self.db, User, payload.user_id):
            raise ResourceNotFoundError("User", payload.user_id)

        project = Project(
            title=payload.title,
            description=payload.description,
            user_id=payload.user_id,
            status=payload.status,
        )
        async with store_operation(self.db, "Failed to create project", "insert"):
            self.db.add(project)
            await self.db.commit()
        logger.info(
            f"Project {project.id} created for user {payload.user_id}",
            extra={"entity": "project", "entity_id": project.id},
        )
        return message_envelope(
            "Project created successfully", projectId=project.id,
        )

    async def update_project(self, project_id: int, payload: ProjectUpdate) -> dict:
        if not await row_exists(self.db, Project, project_id):
            raise ResourceNotFoundError("Project", project_id)

        async with store_operation(self.db, "Failed to update project", "update"):
            await self.db.execute(
                update(Project)
                .where(Project.id == project_id)
                .values(
                    title=payload.title,
                    description=payload.description,
                    status=payload.status,
                ),
            )
            await self.db.commit()
        return message_envelope("Project updated successfully")

    async def delete_project(self, project_id: int) -> dict:
        async with store_operation(self.db, "Failed to delete project", "delete"):
            result = await self.db.execute(
                delete(Project).where(Project.id == project_id),
            )
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Project", project_id)
        return message_envelope("Project deleted successfully")
