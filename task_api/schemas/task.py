"""Task Schemas — creation defaults and full-replace update payload.

Invariants:
    - TaskCreate defaults: status="pending", priority="medium",
      assigned_to=None, due_date=None (applied only when omitted)
    - TaskUpdate fields all default to None: omitted fields are written as null
    - project_id is accepted on create only
    - due_date is kept exactly as sent, offset included
"""

from typing import Any

from pydantic import BaseModel


class TaskCreate(BaseModel):
    title: Any = None
    description: Any = None
    project_id: int | None = None
    assigned_to: int | None = None
    status: Any = "pending"
    priority: Any = "medium"
    due_date: Any = None


class TaskUpdate(BaseModel):
    title: Any = None
    description: Any = None
    status: Any = None
    priority: Any = None
    assigned_to: int | None = None
    due_date: Any = None
