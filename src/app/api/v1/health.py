import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.config import settings
from ...core.db.database import async_get_db
from ...core.schemas import HealthCheck

router = APIRouter(tags=["health"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthCheck)
async def health(db: AsyncSession = Depends(async_get_db)):
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        database = "unavailable"

    return HealthCheck(
        status="healthy" if database == "ok" else "degraded",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        database=database,
    )
