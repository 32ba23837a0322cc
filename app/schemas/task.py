"""Task Schemas: Pydantic models with field-level validation for task endpoints.

Invariants:
    - title: 1-200 chars; description: at most 2000 chars
    - status restricted to TaskStatus values
    - TaskUpdate distinguishes "field absent" from "field set to null"
    - TaskUpdate never carries user_id (ownership is immutable)

Design Decisions:
    - model_fields_set drives partial updates: only keys the client sent are applied
    - Explicit null rejected for status on create and for title/status on update
      (NOT NULL columns); allowed for description
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.core.domain_types import (
    DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TaskStatus,
)

_NON_NULLABLE_CREATE_FIELDS = ("status",)
_NON_NULLABLE_UPDATE_FIELDS = ("title", "status")


def _reject_explicit_nulls(model: BaseModel, names: tuple[str, ...]) -> None:
    for name in names:
        if name in model.model_fields_set and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")


class TaskCreate(BaseModel):
    """Task creation: title required, status defaults later to TODO."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        _reject_explicit_nulls(self, _NON_NULLABLE_CREATE_FIELDS)
        return self


class TaskUpdate(BaseModel):
    """Partial task update: every field optional."""
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(
        None, min_length=1, max_length=TITLE_MAX_LENGTH,
    )
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        _reject_explicit_nulls(self, _NON_NULLABLE_UPDATE_FIELDS)
        return self

    def to_changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent, as column values."""
        return self.model_dump(mode="json", exclude_unset=True)


class TaskResponse(BaseModel):
    """Task response: public-facing task data."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: UUID
    title: str
    description: str | None
    status: TaskStatus
    user_id: UUID
    created_at: datetime
    updated_at: datetime
