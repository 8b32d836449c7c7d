"""Database health check utilities for the health endpoint and startup scripts."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from worldfeel.utils.db_session import get_async_engine

logger = logging.getLogger(__name__)


async def check_db_connection() -> bool:
    """
    Test database connection for health checks.

    Returns:
        bool: True if connection successful, False otherwise.
    """
    try:
        engine = get_async_engine()
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed: %s", e)
        return False
