"""Declarative base, integer primary keys and timestamps shared by users and bookmarks."""
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Primary keys are PostgreSQL INTEGER (int4); larger ids can never match a row.
MAX_INTEGER_ID = 2_147_483_647


def is_valid_id(value: int) -> bool:
    """True if value fits the int4 primary key range used by every table."""
    return 1 <= value <= MAX_INTEGER_ID


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """
    Adds created_at / updated_at, both set by the database with clock_timestamp().

    clock_timestamp() (unlike now()) advances within a transaction, so bookmarks
    created in one request still list newest first.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.clock_timestamp(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.clock_timestamp(),
        nullable=False,
    )

    def touch(self) -> None:
        """Mark the row modified; the timestamp is filled in by the database on flush."""
        self.updated_at = func.clock_timestamp()
