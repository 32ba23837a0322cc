"""User ORM: persists the owner of tasks.

Invariants:
    - id is UUID primary key (client-side default)
    - email is unique, at most 255 chars
    - Deleting a user deletes all of its tasks (ORM cascade + ON DELETE CASCADE)

Design Decisions:
    - passive_deletes=True: the database performs the cascade, the ORM does not
      load every task just to delete it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """User entity: owns zero or more tasks."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(EMAIL_MAX_LENGTH), nullable=False, unique=True,
    )
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )

    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="user",
        cascade="all, delete-orphan", passive_deletes=True,
    )
