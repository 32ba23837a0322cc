"""Request Dependencies: caller identity resolution and per-request services.

Invariants:
    - Credential read from x-user-id header first, userId query parameter second
    - Format validated before any DB access; exactly one user lookup per request
    - Resolved id stored on request.state.user_id for downstream consumers
    - Path ids use the same hyphenated form as credentials (braces, bare hex -> 400)

Design Decisions:
    - FastAPI dependency over middleware: only task routes require identity,
      and failures flow through the same TaskTrackerError handler
"""

from typing import Annotated

from fastapi import Depends, Header, Path, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.enforce_access import UUID_PATTERN, parse_user_identifier
from app.core.errors import UnauthorizedError
from app.infrastructure.database import get_db
from app.repositories.task_repository import SqlTaskRepository
from app.repositories.user_repository import SqlUserRepository
from app.services.task_service import TaskService
from app.services.user_service import UserService

# Path ids accept only the hyphenated 8-4-4-4-12 form, any case.
ResourceIdPath = Annotated[str, Path(pattern=f"(?i){UUID_PATTERN}")]


async def get_current_user_id(
    request: Request,
    x_user_id: str | None = Header(None, alias="x-user-id"),
    user_id_param: str | None = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
) -> UserId:
    """Resolve and verify the calling user's identifier."""
    user_id = parse_user_identifier(x_user_id or user_id_param)
    if await SqlUserRepository(db).find_by_id(user_id) is None:
        raise UnauthorizedError("User not found.")
    request.state.user_id = user_id
    return user_id


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(SqlTaskRepository(db))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))
