# run.py
import asyncio
import logging

import uvicorn

from study_bot.core.config import settings
from study_bot.db.init_db import init_db
from study_bot.db.session import dispose_engine

logger = logging.getLogger(__name__)


async def startup():
    """Create tables when a database is configured"""
    if await init_db(settings.DATABASE_URL, create_tables=True):
        logger.info("Database ready")
        await dispose_engine()
    logger.info(f"API prefix: {settings.API_V1_PREFIX}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(startup())

    uvicorn.run(
        "study_bot.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
