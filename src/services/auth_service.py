"""Service layer for email/password signup and signin."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import create_access_token
from core.config import Settings
from core.security import hash_password, verify_password
from models.user import User
from schemas.auth import AuthRequest
from services.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from services.user_service import get_user_by_email

logger = logging.getLogger(__name__)


async def signup(db: AsyncSession, data: AuthRequest, settings: Settings) -> str:
    """
    Register a new user and return an access token for them.

    Raises:
        EmailAlreadyExistsError: If the email is already registered.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    if await get_user_by_email(db, data.email) is not None:
        raise EmailAlreadyExistsError(data.email)

    user = User(email=data.email, hash=hash_password(data.password))
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Another request registered the same email between our SELECT and INSERT.
        await db.rollback()
        raise EmailAlreadyExistsError(data.email)

    logger.info("Registered user %s", user.id)
    return create_access_token(user.id, user.email, settings)


async def signin(db: AsyncSession, data: AuthRequest, settings: Settings) -> str:
    """
    Verify credentials and return an access token.

    Raises:
        InvalidCredentialsError: If no user has this email or the password is wrong.
    """
    user = await get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.hash):
        logger.info("Failed signin attempt")
        raise InvalidCredentialsError()

    return create_access_token(user.id, user.email, settings)
