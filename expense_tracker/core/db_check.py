import asyncio
import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from expense_tracker.core.config import settings
from expense_tracker.db.session import engine

logger = logging.getLogger(__name__)


async def wait_for_db(retries=None, delay=2):
    if retries is None:
        retries = settings.DB_CONNECT_RETRIES

    for i in range(retries):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connected")
            return
        except (SQLAlchemyError, OSError):
            logger.warning("Database not ready | [ %s/%s ] → retrying...", i + 1, retries)
            await asyncio.sleep(delay)

    raise RuntimeError("Database unreachable after retries")
