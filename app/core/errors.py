"""Error Hierarchy: typed, categorized exceptions for every Task Tracker failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - category and severity travel in the error handler's log record, never in the body
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope {success: false, error: {...}}
    - details only present when the error carries field-level information

Design Decisions:
    - Single hierarchy with TaskTrackerError base: one FastAPI handler catches all
      (ADR: uniform error shape)
    - Default messages on UnauthorizedError/ForbiddenError keep call sites short
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class TaskTrackerError(Exception):
    """Base exception for all Task Tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error envelope."""
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnauthorizedError(TaskTrackerError):
    """Caller identity missing, malformed, or unknown."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class ForbiddenError(TaskTrackerError):
    """Resource exists but belongs to someone else."""
    def __init__(self, message: str = "Forbidden"):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, 403,
        )


class NotFoundError(TaskTrackerError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str):
        super().__init__(
            f"{resource_type} not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type


class ValidationError(TaskTrackerError):
    """Request shape or format violation."""
    def __init__(
        self, message: str, details: list[dict[str, Any]] | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, details,
        )


class ConflictError(TaskTrackerError):
    """Uniqueness violation detected before insert."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TaskTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
