"""
Background removal of expired submissions.

Reads already ignore rows past `expires_at`, so the sweeper only keeps the
table small. A failed sweep is logged and retried on the next interval.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from worldfeel.config.settings import settings
from worldfeel.core.record_store import SubmissionStore
from worldfeel.monitoring.metrics import record_purged
from worldfeel.utils.db_session import get_db_session_context_manager

logger = logging.getLogger(__name__)


async def purge_expired(
    now: Optional[datetime] = None,
    session_scope: Callable = get_db_session_context_manager,
) -> int:
    """Delete submissions whose `expires_at` has passed. Returns the number removed."""
    now = now or datetime.now(timezone.utc)
    async with session_scope() as session:
        removed = await SubmissionStore(session).delete_expired(now)
    record_purged(removed)
    if removed:
        logger.info("Expiry sweep removed %d submissions", removed)
    else:
        logger.debug("Expiry sweep found nothing to remove")
    return removed


async def run_expiry_sweeper(
    interval_seconds: Optional[float] = None,
    session_scope: Callable = get_db_session_context_manager,
) -> None:
    """Run purge_expired forever, sleeping `interval_seconds` between sweeps."""
    interval = interval_seconds or settings.EXPIRY_SWEEP_INTERVAL_SECONDS
    logger.info("Expiry sweeper started. Interval: %ss", interval)
    try:
        while True:
            try:
                await purge_expired(session_scope=session_scope)
            except (SQLAlchemyError, OSError) as e:
                logger.error("Expiry sweep failed: %s", e, exc_info=True)
            await asyncio.sleep(interval)
    except asyncio.CancelledError:
        logger.info("Expiry sweeper cancelled. Shutting down.")
        raise
