"""Presence Validation — required-field checks shared by every create handler.

Invariants:
    - A field is missing when its value is falsy (None, "", 0)
    - All fields are checked before raising, so the error lists every gap
    - Pure function: no IO, no logging
"""

from typing import Any

from task_api.core.errors import MissingFieldsError


def require_fields(payload: dict[str, Any], fields: list[str], message: str) -> None:
    """Raise MissingFieldsError(message) unless every field has a truthy value."""
    missing = [name for name in fields if not payload.get(name)]
    if missing:
        raise MissingFieldsError(message, missing)
