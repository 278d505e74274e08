"""
MangoNote Backend - Database Engine & Sessions
================================================

What:  Async engine for the notes database, the ORM base class, and the
       per-request session dependency.
How:   One pooled AsyncEngine per process (asyncpg driver). Route handlers
       receive an AsyncSession through Depends(get_db_session); the session
       commits when the handler returns and rolls back when it raises.

Pool sizing comes from settings (DB_POOL_SIZE, DB_MAX_OVERFLOW,
DB_POOL_PRE_PING). Connections are recycled hourly so server-side idle
timeouts never hand out a dead connection.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=settings.db_pool_pre_ping,
    pool_recycle=3600,
    echo=settings.log_level == "DEBUG",
)

# Rows stay readable after commit; responses are built from them afterwards
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for the `notes` and `mind_maps` models."""


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield one session per request.

    Lookups only read, but PUT /api/mindmaps/{id} flushes changes that must
    be committed once the handler has built its response.

    Handlers answer database failures themselves (500 envelope) instead of
    raising, so a session whose flush failed can come back here normally.
    It is inactive at that point and is rolled back rather than committed.
    """
    async with async_session_factory() as session:
        try:
            yield session
            if session.is_active:
                await session.commit()
            else:
                await session.rollback()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await engine.dispose()
