"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces {"success": false, "error": <message>}
    - Messages are safe for clients; store-level causes are only ever logged

Design Decisions:
    - Single hierarchy with TaskApiError base: FastAPI global handler catches all
    - http_status travels with the exception so routes never pick status codes
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class TaskApiError(Exception):
    """Base exception for all Task API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard failure envelope."""
        return {"success": False, "error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingFieldsError(TaskApiError):
    """One or more required request fields are absent or empty."""
    def __init__(self, message: str, fields: list[str]):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.fields = fields


class ResourceNotFoundError(TaskApiError):
    """Target row, or a row it must reference, does not exist."""
    def __init__(self, resource_type: str, resource_id: object = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskApiError):
    """Store operation failed. message is the generic client-facing text."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
