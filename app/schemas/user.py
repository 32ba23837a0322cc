"""User Schemas: creation payload and public user representation.

Invariants:
    - UserCreate.email: valid address, at most 255 chars, stored exactly as sent
    - UserCreate.name: 1-100 chars

Design Decisions:
    - email_validator checks format only; its normalized form is discarded so
      uniqueness stays a case-sensitive exact match on the submitted string
"""

from datetime import datetime
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.core.domain_types import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH


class UserCreate(BaseModel):
    """User creation: email + display name, nothing else accepted."""
    model_config = ConfigDict(extra="forbid")

    email: str = Field(max_length=EMAIL_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("email")
    @classmethod
    def check_email_format(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


class UserResponse(BaseModel):
    """User response: public-facing user data."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: UUID
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
