"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, TaskId wrap UUIDs; never use bare UUID in domain logic
    - All valid task states encoded as an Enum; no raw string matching
    - TaskStatus values are upper-case and double as the wire format

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
    - No transition graph: any status may move to any other (product decision pending)
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
TaskId = NewType("TaskId", UUID)


# ─── Field Limits ────────────────────────────────────────────────

TITLE_MAX_LENGTH: int = 200
DESCRIPTION_MAX_LENGTH: int = 2000
EMAIL_MAX_LENGTH: int = 255
NAME_MAX_LENGTH: int = 100


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task lifecycle states; maps to DB `status` column."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    ARCHIVED = "ARCHIVED"


DEFAULT_TASK_STATUS: TaskStatus = TaskStatus.TODO


class Environment(str, Enum):
    """Deployment environment; drives error masking and stack traces."""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"
