"""User Routes: unauthenticated creation and lookup of users.

Invariants:
    - POST returns 201 with the created user; duplicate email -> 409
    - GET by id: malformed or non-hyphenated UUID -> 400, unknown id -> 404
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.dependencies import ResourceIdPath, get_user_service
from app.core.domain_types import UserId
from app.schemas.envelope import SuccessEnvelope
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=SuccessEnvelope[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, users: UserService = Depends(get_user_service),
):
    """Create a user."""
    user = await users.create(body)
    return SuccessEnvelope(data=UserResponse.model_validate(user))


@router.get("/{user_id}", response_model=SuccessEnvelope[UserResponse])
async def get_user(
    user_id: ResourceIdPath, users: UserService = Depends(get_user_service),
):
    """Get a user by id."""
    user = await users.get_by_id(UserId(UUID(user_id)))
    return SuccessEnvelope(data=UserResponse.model_validate(user))
