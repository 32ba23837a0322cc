"""Task Service: ownership enforcement and status semantics for tasks.

Invariants:
    - get/update/delete/archive: existence check, then ownership check, then action
    - create always assigns the caller as owner; status defaults to TODO
    - archive sets ARCHIVED unconditionally (no transition guard)
    - update applies only the fields the client sent

Design Decisions:
    - Status transitions unconstrained: any value to any value through update,
      pending product clarification
"""

import logging

from app.core.domain_types import DEFAULT_TASK_STATUS, TaskId, TaskStatus, UserId
from app.core.enforce_access import check_task_access
from app.core.repository_protocols import TaskLike, TaskRepository
from app.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations scoped to a calling user."""

    def __init__(self, tasks: TaskRepository):
        self.tasks = tasks

    async def list(
        self, owner_id: UserId, status_filter: TaskStatus | None = None,
    ) -> list[TaskLike]:
        return await self.tasks.find_by_user_id(owner_id, status_filter)

    async def get_by_id(self, task_id: TaskId, caller_id: UserId) -> TaskLike:
        task = await self.tasks.find_by_id(task_id)
        return check_task_access(task, caller_id)

    async def create(self, owner_id: UserId, data: TaskCreate) -> TaskLike:
        task = await self.tasks.create(
            owner_id,
            data.title,
            data.description,
            data.status or DEFAULT_TASK_STATUS,
        )
        logger.info(
            "Task created",
            extra={"task_id": str(task.id), "user_id": str(owner_id)},
        )
        return task

    async def update(
        self, task_id: TaskId, caller_id: UserId, data: TaskUpdate,
    ) -> TaskLike:
        task = await self.get_by_id(task_id, caller_id)
        return await self.tasks.update(task, data.to_changes())

    async def delete(self, task_id: TaskId, caller_id: UserId) -> None:
        task = await self.get_by_id(task_id, caller_id)
        await self.tasks.delete(task)
        logger.info(
            "Task deleted",
            extra={"task_id": str(task_id), "user_id": str(caller_id)},
        )

    async def archive(self, task_id: TaskId, caller_id: UserId) -> TaskLike:
        task = await self.get_by_id(task_id, caller_id)
        return await self.tasks.archive(task)
