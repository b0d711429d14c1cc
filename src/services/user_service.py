"""Service layer for user profile operations."""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.exceptions import EmailAlreadyExistsError


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by (already normalized) email."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply a partial profile update. Only fields present in the request are changed.

    Raises:
        EmailAlreadyExistsError: If the new email belongs to another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email is not None and new_email != user.email:
        existing = await get_user_by_email(db, new_email)
        if existing is not None and existing.id != user.id:
            raise EmailAlreadyExistsError(new_email)

    for field, value in update_data.items():
        setattr(user, field, value)

    if update_data:
        user.touch()

    try:
        await db.flush()
    except IntegrityError:
        # Another request claimed the email between our SELECT and UPDATE.
        await db.rollback()
        raise EmailAlreadyExistsError(new_email)
    await db.refresh(user)
    return user
