"""Boundary Protocols: contracts between core/services and the persistence shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by app.repositories via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: repository methods are async because implementations do IO,
      but core pure functions that USE these shapes are never async themselves
    - Repositories return ORM rows typed as UserLike/TaskLike so services never
      import the ORM models
"""

from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from app.core.domain_types import TaskStatus, UserId, TaskId


class UserLike(Protocol):
    """Structural contract for User rows handed to services and routes."""
    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime


class TaskLike(Protocol):
    """Structural contract for Task rows handed to services and routes."""
    id: UUID
    title: str
    description: str | None
    status: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class UserRepository(Protocol):
    """Contract for user persistence; implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def find_by_email(self, email: str) -> UserLike | None: ...
    async def create(self, email: str, name: str) -> UserLike: ...


class TaskRepository(Protocol):
    """Contract for task persistence; implemented by shell."""
    async def find_by_id(self, task_id: TaskId) -> TaskLike | None: ...
    async def find_by_user_id(
        self, user_id: UserId, status: TaskStatus | None = None,
    ) -> list[TaskLike]: ...
    async def create(
        self,
        user_id: UserId,
        title: str,
        description: str | None,
        status: TaskStatus,
    ) -> TaskLike: ...
    async def update(
        self, task: TaskLike, changes: dict[str, Any],
    ) -> TaskLike: ...
    async def delete(self, task: TaskLike) -> None: ...
    async def archive(self, task: TaskLike) -> TaskLike: ...
