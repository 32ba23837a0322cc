"""Task Repository: lookups, owner listing, and single-row writes for the tasks table.

Invariants:
    - find_by_user_id returns newest first (created_at DESC)
    - update() only touches keys present in `changes`, and only updatable columns
    - user_id is never written after insert
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TaskId, TaskStatus, UserId
from app.models.task import Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "description", "status"})


class SqlTaskRepository:
    """TaskRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, task_id: TaskId) -> Task | None:
        return await self.db.get(Task, task_id)

    async def find_by_user_id(
        self, user_id: UserId, status: TaskStatus | None = None,
    ) -> list[Task]:
        query = select(Task).where(Task.user_id == user_id)
        if status is not None:
            query = query.where(Task.status == status.value)
        query = query.order_by(Task.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        user_id: UserId,
        title: str,
        description: str | None,
        status: TaskStatus,
    ) -> Task:
        task = Task(
            title=title, description=description,
            status=status.value, user_id=user_id,
        )
        self.db.add(task)
        await self.db.commit()
        await self.db.refresh(task)
        return task

    async def update(self, task: Task, changes: dict[str, Any]) -> Task:
        ignored = set(changes) - UPDATABLE_FIELDS
        if ignored:
            logger.warning(f"Ignoring non-updatable task fields: {sorted(ignored)}")
        for name in UPDATABLE_FIELDS & set(changes):
            setattr(task, name, changes[name])
        await self.db.commit()
        await self.db.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self.db.delete(task)
        await self.db.commit()

    async def archive(self, task: Task) -> Task:
        task.status = TaskStatus.ARCHIVED.value
        await self.db.commit()
        await self.db.refresh(task)
        return task
