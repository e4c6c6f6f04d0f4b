"""Task Handlers — list, create, update, delete for /api/tasks.

Invariants:
    - create requires title and project_id, and the project must exist at check time
    - assigned_to is stored as given; it is never checked against users
    - update is a full replace of title, description, status, priority,
      assigned_to and due_date; project_id is fixed at creation
    - list left-joins project title and assignee name (None when absent)
"""

import logging

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.core.envelope import list_envelope, message_envelope
from task_api.core.errors import ResourceNotFoundError
from task_api.core.validation import require_fields
from task_api.infrastructure.database import store_operation
from task_api.models.project import Project
from task_api.models.task import Task
from task_api.models.user import User
from task_api.schemas.task import TaskCreate, TaskUpdate
from task_api.services.row_exists import row_exists

logger = logging.getLogger(__name__)


class TaskHandlers:
    """CRUD handlers for tasks."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_tasks(self) -> dict:
        query = (
            select(
                Task,
                Project.title.label("project_title"),
                User.name.label("assigned_to_name"),
            )
            .outerjoin(Project, Task.project_id == Project.id)
            .outerjoin(User, Task.assigned_to == User.id)
            .order_by(Task.created_at.desc(), Task.id.desc())
        )
        async with store_operation(self.db, "Failed to get tasks", "list"):
            rows = (await self.db.execute(query)).all()
        return list_envelope([
            {
                **task.as_dict(),
                "project_title": project_title,
                "assigned_to_name": assigned_to_name,
            }
            for task, project_title, assigned_to_name in rows
        ])

    async def create_task(self, payload: TaskCreate) -> dict:
        require_fields(
            payload.model_dump(), ["title", "project_id"],
            "Title and project_id are required",
        )
        if not await row_exists(self.db, Project, payload.project_id):
            raise ResourceNotFoundError("Project", payload.project_id)

        task = Task(
            title=payload.title,
            description=payload.description,
            project_id=payload.project_id,
            assigned_to=payload.assigned_to,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
        )
        async with store_operation(self.db, "Failed to create task", "insert"):
            self.db.add(task)
            await self.db.commit()
        logger.info(
            f"Task {task.id} created in project {payload.project_id}",
            extra={"entity": "task", "entity_id": task.id},
        )
        return message_envelope("Task created successfully", taskId=task.id)

    async def update_task(self, task_id: int, payload: TaskUpdate) -> dict:
        if not await row_exists(self.db, Task, task_id):
            raise ResourceNotFoundError("Task", task_id)

        async with store_operation(self.db, "Failed to update task", "update"):
            await self.db.execute(
                update(Task)
                .where(Task.id == task_id)
                .values(
                    title=payload.title,
                    description=payload.description,
                    status=payload.status,
                    priority=payload.priority,
                    assigned_to=payload.assigned_to,
                    due_date=payload.due_date,
                ),
            )
            await self.db.commit()
        return message_envelope("Task updated successfully")

    async def delete_task(self, task_id: int) -> dict:
        async with store_operation(self.db, "Failed to delete task", "delete"):
            result = await self.db.execute(
                delete(Task).where(Task.id == task_id),
            )
            await self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Task", task_id)
        return message_envelope("Task deleted successfully")
