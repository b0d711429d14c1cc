"""Pydantic schemas for bookmark endpoints."""
from datetime import datetime
from typing import Annotated

from pydantic import HttpUrl, StringConstraints, field_validator

from schemas.base import CamelModel

MAX_TITLE_LENGTH = 500

# Surrounding whitespace is stripped before the length check, so "   " is rejected.
Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_TITLE_LENGTH),
]


class BookmarkCreate(CamelModel):
    """Schema for creating a new bookmark."""

    title: Title
    # HttpUrl normalizes root domains with trailing slash (example.com -> example.com/)
    # but preserves paths as-is (example.com/page stays example.com/page)
    link: HttpUrl
    description: str | None = None


class BookmarkUpdate(CamelModel):
    """
    Schema for updating an existing bookmark.

    Only fields present in the request body are applied.
    """

    title: Title | None = None
    link: HttpUrl | None = None
    description: str | None = None

    @field_validator("title", "link", mode="before")
    @classmethod
    def reject_null(cls, v: object) -> object:
        """Title and link are required columns, so they can be changed but not cleared."""
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class BookmarkResponse(CamelModel):
    """Schema for bookmark responses."""

    id: int
    title: str
    description: str | None
    link: str
    user_id: int
    created_at: datetime
    updated_at: datetime
