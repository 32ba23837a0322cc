"""Error Hierarchy: codes, statuses, and envelope shape per error type."""

import pytest

from app.core.errors import (
    ConflictError,
    DatabaseError,
    ErrorCategory,
    ErrorSeverity,
    ForbiddenError,
    NotFoundError,
    TaskTrackerError,
    UnauthorizedError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error, code, status, message",
    [
        (NotFoundError("User"), "NOT_FOUND", 404, "User not found"),
        (UnauthorizedError(), "UNAUTHORIZED", 401, "Unauthorized"),
        (UnauthorizedError("Invalid token"), "UNAUTHORIZED", 401, "Invalid token"),
        (ForbiddenError(), "FORBIDDEN", 403, "Forbidden"),
        (ForbiddenError("Access denied"), "FORBIDDEN", 403, "Access denied"),
        (ValidationError("Invalid input"), "VALIDATION_ERROR", 400, "Invalid input"),
        (ConflictError("Email already exists"), "CONFLICT", 409, "Email already exists"),
    ],
)
def test_domain_error_properties(error, code, status, message):
    assert isinstance(error, TaskTrackerError)
    assert error.code == code
    assert error.http_status == status
    assert error.message == message
    assert str(error) == message


def test_to_response_envelope_without_details():
    assert NotFoundError("Task").to_response() == {
        "success": False,
        "error": {"code": "NOT_FOUND", "message": "Task not found"},
    }


def test_to_response_includes_details_when_present():
    details = [{"field": "body.title", "message": "required", "type": "missing"}]
    response = ValidationError("Validation failed", details).to_response()
    assert response["error"]["details"] == details


def test_database_error_is_500_class():
    error = DatabaseError("Integrity constraint violated", "commit")
    assert error.http_status >= 500
    assert error.category == ErrorCategory.DATABASE
    assert error.severity == ErrorSeverity.CRITICAL
    assert error.message == "Database commit failed: Integrity constraint violated"
