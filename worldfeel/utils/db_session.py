"""
Async engine and session handling for the worldfeel database.

Request handlers get a session through the `get_db_session` dependency; the
expiry sweeper, the unknown-emotion tracker and the CLI open their own with
`get_db_session_context_manager`. Both commit on success and roll back on error.
"""
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from worldfeel.config.settings import settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        pool_size=10,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    # Submissions are returned to the caller after commit, so keep them loaded.
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


@asynccontextmanager
async def get_db_session_context_manager() -> AsyncGenerator[AsyncSession, None]:
    """Open a session that commits when the block exits cleanly."""
    async with get_async_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one transaction per request."""
    async with get_db_session_context_manager() as session:
        yield session
