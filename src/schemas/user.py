"""Pydantic schemas for user profile endpoints."""
from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from schemas.base import CamelModel


class UserUpdate(CamelModel):
    """Schema for a partial update of the current user's profile."""

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: object) -> object:
        """Trim and lowercase the email; an explicit null is rejected."""
        if v is None:
            raise ValueError("Email cannot be null")
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserResponse(CamelModel):
    """Response model for user info. The password hash is never exposed."""

    id: int
    email: str
    first_name: str | None
    last_name: str | None
    created_at: datetime
    updated_at: datetime
