"""
Record Store for the worldfeel service.

Thin async repository over the 'submissions' table. Every read filters on
`expires_at > now`, so rows waiting for the expiry sweeper are never counted.
Only the Submission Coordinator calls the mutating methods.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy import asc, delete, desc, event, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from worldfeel.models import SubmissionORM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordTally:
    """Active submissions grouped by word."""
    word: str
    count: int
    last_created_at: datetime


class SubmissionStore:
    """
    Data access for submission records.

    Args:
        session: Request-scoped async session. The caller owns commit/rollback.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_latest_active(
        self,
        identity_hash: str,
        device_token: Optional[str],
        now: datetime,
    ) -> Optional[SubmissionORM]:
        """Most recent active record reachable by identity hash or device token."""
        keys = [SubmissionORM.identity_hash == identity_hash]
        if device_token:
            keys.append(SubmissionORM.device_token == device_token)

        stmt = (
            select(SubmissionORM)
            .where(SubmissionORM.expires_at > now, or_(*keys))
            .order_by(desc(SubmissionORM.created_at), desc(SubmissionORM.id))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def insert(
        self,
        *,
        word: str,
        identity_hash: str,
        device_token: Optional[str],
        created_at: datetime,
        expires_at: datetime,
    ) -> Optional[SubmissionORM]:
        """
        Insert a new record unless an active one already holds the identity hash.

        An expired row with the same hash that the sweeper has not removed yet is
        overwritten in place. Returns None when an active record won the race.
        """
        values = dict(
            word=word,
            identity_hash=identity_hash,
            device_token=device_token,
            created_at=created_at,
            expires_at=expires_at,
            updated_at=None,
        )
        stmt = pg_insert(SubmissionORM).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SubmissionORM.identity_hash],
            set_={key: stmt.excluded[key] for key in values if key != "identity_hash"},
            where=SubmissionORM.expires_at <= created_at,
        ).returning(SubmissionORM)

        result = await self._session.scalars(
            stmt, execution_options={"populate_existing": True}
        )
        record = result.first()
        if record is None:
            logger.info("Insert skipped: an active submission already holds this identity")
        return record

    async def update_word(
        self,
        record: SubmissionORM,
        word: str,
        device_token: Optional[str],
        now: datetime,
    ) -> SubmissionORM:
        """Change the word of an existing record; created_at and expires_at stay untouched."""
        values = {"word": word, "updated_at": now}
        if device_token and not record.device_token:
            values["device_token"] = device_token

        for key, value in values.items():
            setattr(record, key, value)
        await self._session.flush()
        return record

    async def ranked_word_tallies(self, now: datetime, limit: int) -> List[WordTally]:
        """Top `limit` words by count desc, latest submission desc, word asc."""
        count_col = func.count(SubmissionORM.id).label("word_count")
        last_col = func.max(SubmissionORM.created_at).label("last_created_at")
        stmt = (
            select(SubmissionORM.word, count_col, last_col)
            .where(SubmissionORM.expires_at > now)
            .group_by(SubmissionORM.word)
            .order_by(desc(count_col), desc(last_col), asc(SubmissionORM.word))
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [
            WordTally(word=row.word, count=row.word_count, last_created_at=row.last_created_at)
            for row in result.all()
        ]

    async def count_active(self, now: datetime) -> int:
        stmt = select(func.count(SubmissionORM.id)).where(SubmissionORM.expires_at > now)
        return (await self._session.execute(stmt)).scalar_one()

    async def count_distinct_words(self, now: datetime) -> int:
        stmt = select(func.count(func.distinct(SubmissionORM.word))).where(SubmissionORM.expires_at > now)
        return (await self._session.execute(stmt)).scalar_one()

    async def count_word(self, word: str, now: datetime) -> int:
        stmt = select(func.count(SubmissionORM.id)).where(
            SubmissionORM.expires_at > now,
            SubmissionORM.word == word,
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def count_words_above(self, count: int, now: datetime) -> int:
        """Number of distinct active words with strictly more submissions than `count`."""
        per_word = (
            select(SubmissionORM.word)
            .where(SubmissionORM.expires_at > now)
            .group_by(SubmissionORM.word)
            .having(func.count(SubmissionORM.id) > count)
            .subquery()
        )
        stmt = select(func.count()).select_from(per_word)
        return (await self._session.execute(stmt)).scalar_one()

    async def latest_word_for_device(self, device_token: str, now: datetime) -> Optional[str]:
        stmt = (
            select(SubmissionORM.word)
            .where(SubmissionORM.expires_at > now, SubmissionORM.device_token == device_token)
            .order_by(desc(SubmissionORM.created_at))
            .limit(1)
        )
        return (await self._session.execute(stmt)).scalars().first()

    async def delete_expired(self, now: datetime) -> int:
        result = await self._session.execute(
            delete(SubmissionORM).where(SubmissionORM.expires_at <= now)
        )
        return result.rowcount or 0

    async def delete_all(self) -> int:
        result = await self._session.execute(delete(SubmissionORM))
        return result.rowcount or 0

    def on_commit(self, callback: Callable[[], None]) -> None:
        """Run `callback` once, after the session's next successful commit."""
        event.listen(self._session.sync_session, "after_commit", lambda _session: callback(), once=True)
