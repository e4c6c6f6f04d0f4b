"""Response Envelope — the uniform {success, data|message|error, ...} shape.

Invariants:
    - Success responses always carry success=True
    - List responses carry count == len(data)
    - Failure envelopes are built by TaskApiError.to_response(), not here
"""

from typing import Any


def list_envelope(rows: list[dict[str, Any]]) -> dict[str, Any]:
    """Wrap a list of rows."""
    return {"success": True, "data": rows, "count": len(rows)}


def message_envelope(message: str, **extra: Any) -> dict[str, Any]:
    """Wrap a confirmation message, e.g. message_envelope("...", userId=1)."""
    return {"success": True, "message": message, **extra}
