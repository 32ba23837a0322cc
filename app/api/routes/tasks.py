"""Task Routes: owner-scoped CRUD plus the archive shortcut.

Invariants:
    - Every endpoint requires a resolved caller (get_current_user_id)
    - Status filter and body validated by Pydantic before the service runs
    - DELETE answers 204 with an empty body

Design Decisions:
    - Archive as its own POST endpoint: status-only mutation without a body
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import (
    ResourceIdPath, get_current_user_id, get_task_service,
)
from app.core.domain_types import TaskId, TaskStatus, UserId
from app.schemas.envelope import SuccessEnvelope
from app.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from app.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=SuccessEnvelope[list[TaskResponse]])
async def list_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    """List the caller's tasks, newest first, optionally by status."""
    found = await tasks.list(caller_id, status_filter)
    return SuccessEnvelope(
        data=[TaskResponse.model_validate(t) for t in found],
    )


@router.post(
    "", response_model=SuccessEnvelope[TaskResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate,
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.create(caller_id, body)
    return SuccessEnvelope(data=TaskResponse.model_validate(task))


@router.get("/{task_id}", response_model=SuccessEnvelope[TaskResponse])
async def get_task(
    task_id: ResourceIdPath,
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.get_by_id(TaskId(UUID(task_id)), caller_id)
    return SuccessEnvelope(data=TaskResponse.model_validate(task))


@router.patch("/{task_id}", response_model=SuccessEnvelope[TaskResponse])
async def update_task(
    task_id: ResourceIdPath,
    body: TaskUpdate,
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    """Apply a partial update; absent fields stay unchanged."""
    task = await tasks.update(TaskId(UUID(task_id)), caller_id, body)
    return SuccessEnvelope(data=TaskResponse.model_validate(task))


@router.post(
    "/{task_id}/archive", response_model=SuccessEnvelope[TaskResponse],
)
async def archive_task(
    task_id: ResourceIdPath,
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    task = await tasks.archive(TaskId(UUID(task_id)), caller_id)
    return SuccessEnvelope(data=TaskResponse.model_validate(task))


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: ResourceIdPath,
    caller_id: UserId = Depends(get_current_user_id),
    tasks: TaskService = Depends(get_task_service),
):
    await tasks.delete(TaskId(UUID(task_id)), caller_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
