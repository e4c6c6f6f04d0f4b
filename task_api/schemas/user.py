"""User Schemas — create and update share one payload shape."""

from typing import Any

from pydantic import BaseModel


class UserPayload(BaseModel):
    """Body of POST /api/users and PUT /api/users/{id}."""
    name: Any = None
    email: Any = None
