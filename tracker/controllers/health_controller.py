import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.database import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Liveness plus a round trip to the database"""
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"❌ Health check DB ping failed: {e}")
        database = "unavailable"
    return {
        "status": "healthy" if database == "ok" else "degraded",
        "service": "tracker-service",
        "database": database,
    }
