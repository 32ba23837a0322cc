"""Access Enforcement: pure identity parsing and task ownership checks.

Invariants:
    - parse_user_identifier is PURE: no DB lookup, only format validation
    - check_task_access always checks existence before ownership (404 before 403)
    - Both raise domain errors; the shell never inspects owner ids itself

Design Decisions:
    - Ownership check extracted from TaskService: one rule, reused by get/update/delete/archive
    - Accepts any object with a user_id attribute (TaskLike) so tests need no ORM
"""

import re
from uuid import UUID

from app.core.domain_types import UserId
from app.core.errors import ForbiddenError, NotFoundError, UnauthorizedError
from app.core.repository_protocols import TaskLike

UUID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
USER_ID_PATTERN = re.compile(UUID_PATTERN, re.IGNORECASE)


def parse_user_identifier(raw: str | None) -> UserId:
    """Validate a caller-supplied credential and return it as a UserId."""
    if not raw:
        raise UnauthorizedError(
            "Missing user identifier. Provide x-user-id header "
            "or userId query parameter.",
        )
    if not USER_ID_PATTERN.fullmatch(raw):
        raise UnauthorizedError("Invalid user identifier format.")
    return UserId(UUID(raw))


def check_task_access(task: TaskLike | None, caller_id: UserId) -> TaskLike:
    """Return the task if it exists and belongs to caller_id."""
    if task is None:
        raise NotFoundError("Task")
    if task.user_id != caller_id:
        raise ForbiddenError("You do not have access to this task")
    return task
