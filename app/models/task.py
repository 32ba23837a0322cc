"""Task ORM: persists a unit of work owned by exactly one user.

Invariants:
    - Always belongs to a User (user_id FK, ON DELETE CASCADE)
    - user_id is fixed at creation; no code path reassigns it
    - status is one of TaskStatus values, default TODO
    - updated_at refreshed on every UPDATE

Design Decisions:
    - status as String(20) over a DB enum: adding a state needs no ALTER TYPE
    - Indexes on user_id and status back the owner+status listing query
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.core.domain_types import DEFAULT_TASK_STATUS, TITLE_MAX_LENGTH
from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(Base):
    """Task entity: title, optional description, status."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_TASK_STATUS.value,
        index=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
        onupdate=_utcnow,
    )

    user: Mapped["User"] = relationship("User", back_populates="tasks")
