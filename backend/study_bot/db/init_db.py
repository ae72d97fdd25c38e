# study_bot/db/init_db.py
import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import text
from tenacity import retry, stop_after_attempt, wait_exponential

from . import models  # noqa: F401 (registers tables on Base.metadata)
from .session import Base, configure_engine, dispose_engine, get_engine
from ..core.config import settings

logger = logging.getLogger(__name__)


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True
)
async def verify_db_connection() -> bool:
    engine = get_engine()
    if engine is None:
        return False
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


async def init_db(database_url: Optional[str] = None, create_tables: bool = False) -> bool:
    """Connect to the database if configured. Returns False in degraded mode."""
    if database_url is None:
        database_url = settings.DATABASE_URL
    if configure_engine(database_url) is None:
        return False

    try:
        await verify_db_connection()
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"[Database] Connection check failed, continuing without it: {e}")
        await dispose_engine()
        return False

    if create_tables:
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    return True


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_db(create_tables=True))
