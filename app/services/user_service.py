"""User Service: lookup and creation with an email uniqueness pre-check.

Invariants:
    - get_by_id raises NotFoundError("User") when absent
    - create raises ConflictError when the exact email already exists

Design Decisions:
    - Pre-check then insert, not transactional: a concurrent insert of the same
      email surfaces as the generic DatabaseError from the unique constraint
"""

from app.core.domain_types import UserId
from app.core.errors import ConflictError, NotFoundError
from app.core.repository_protocols import UserLike, UserRepository
from app.schemas.user import UserCreate


class UserService:

    def __init__(self, users: UserRepository):
        self.users = users

    async def get_by_id(self, user_id: UserId) -> UserLike:
        user = await self.users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User")
        return user

    async def create(self, data: UserCreate) -> UserLike:
        if await self.users.find_by_email(data.email) is not None:
            raise ConflictError("Email already in use")
        return await self.users.create(data.email, data.name)
