"""
Tracking of words that had no color mapping.

Writes happen in background tasks with their own database session so they can
never delay or fail a stats response.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Set

from sqlalchemy import desc, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from worldfeel.models import UnknownEmotionORM
from worldfeel.utils.db_session import get_db_session_context_manager

logger = logging.getLogger(__name__)

MAX_TRACKED_WORD_LENGTH = 50


class UnknownEmotionTracker:
    """
    Upserts unknown words into 'unknown_emotions'.

    Args:
        session_scope: Factory returning an async context manager that yields a
            session and commits on exit.
    """

    def __init__(self, session_scope: Callable = get_db_session_context_manager):
        self._session_scope = session_scope
        self._pending: Set[asyncio.Task] = set()

    async def record(self, word: str) -> None:
        normalized = word.strip().lower()[:MAX_TRACKED_WORD_LENGTH]
        if not normalized:
            return
        now = datetime.now(timezone.utc)
        stmt = pg_insert(UnknownEmotionORM).values(
            word=normalized,
            count=1,
            first_seen_at=now,
            last_seen_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[UnknownEmotionORM.word],
            set_={
                "count": UnknownEmotionORM.count + 1,
                "last_seen_at": stmt.excluded.last_seen_at,
            },
        )
        async with self._session_scope() as session:
            await session.execute(stmt)
        logger.debug("Recorded unknown emotion '%s'", normalized)

    async def _record_quietly(self, word: str) -> None:
        try:
            await self.record(word)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("UnknownEmotion upsert failed for '%s': %s", word, e)

    def schedule(self, word: str) -> Optional[asyncio.Task]:
        """Record `word` in the background. Returns the task, or None outside an event loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; unknown emotion '%s' not recorded", word)
            return None
        task = loop.create_task(self._record_quietly(word))
        # Keep a reference so the task is not garbage collected mid-flight.
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for in-flight writes; used on shutdown."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


async def list_unknown_emotions(session: AsyncSession, limit: int = 100) -> List[UnknownEmotionORM]:
    """Most recently seen unknown words first."""
    stmt = select(UnknownEmotionORM).order_by(desc(UnknownEmotionORM.last_seen_at)).limit(limit)
    result = await session.execute(stmt)
    return list(result.scalars().all())
