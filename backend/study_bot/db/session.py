# study_bot/db/session.py
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def configure_engine(database_url: str) -> Optional[async_sessionmaker]:
    """Create the engine and session factory, or None when the database is unavailable."""
    global _engine, _session_factory

    if not database_url:
        logger.warning("[Database] DATABASE_URL not set, running without user persistence")
        return None

    try:
        _engine = create_async_engine(database_url, pool_pre_ping=True)
    except (ArgumentError, ImportError) as e:
        logger.warning(f"[Database] Failed to create engine: {e}")
        _engine = None
        _session_factory = None
        return None

    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return _session_factory


def get_engine() -> Optional[AsyncEngine]:
    return _engine


def get_session_factory() -> Optional[async_sessionmaker]:
    return _session_factory


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[Optional[AsyncSession], None]:
    factory = get_session_factory()
    if factory is None:
        yield None
        return

    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()
