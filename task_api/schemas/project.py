"""Project Schemas — create accepts an owner, update does not.

Invariants:
    - status defaults to "active" only when omitted; an explicit null is kept
    - ProjectUpdate has no user_id: the owner is fixed at creation
"""

from typing import Any

from pydantic import BaseModel


class ProjectCreate(BaseModel):
    title: Any = None
    description: Any = None
    user_id: int | None = None
    status: Any = "active"


class ProjectUpdate(BaseModel):
    title: Any = None
    description: Any = None
    status: Any = None
