"""Liveness endpoint reporting whether the bookmarks database answers."""
import logging

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    database: str
    version: str


async def database_is_reachable(db: AsyncSession) -> bool:
    """Run a trivial query; driver and pool errors count as unreachable."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Unauthenticated. Always 200; a failed query reports `degraded`."""
    if await database_is_reachable(db):
        return HealthResponse(status="healthy", database="healthy", version=request.app.version)
    return HealthResponse(status="degraded", database="unhealthy", version=request.app.version)
