import asyncio
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from worldfeel.core.unknown_emotions import UnknownEmotionTracker, list_unknown_emotions


def session_scope_for(session):
    @asynccontextmanager
    async def scope():
        yield session
    return scope


@pytest.fixture
def mock_session():
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    return session


class TestUnknownEmotionTracker:
    @pytest.mark.asyncio
    async def test_record_upserts_lowercased_word(self, mock_session):
        tracker = UnknownEmotionTracker(session_scope=session_scope_for(mock_session))

        await tracker.record("  Qwertyfeel ")

        mock_session.execute.assert_awaited_once()
        stmt = mock_session.execute.call_args.args[0]
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "INSERT INTO unknown_emotions" in sql
        assert "ON CONFLICT (word) DO UPDATE" in sql
        assert stmt.compile(dialect=postgresql.dialect()).params["word"] == "qwertyfeel"

    @pytest.mark.asyncio
    async def test_blank_word_is_ignored(self, mock_session):
        tracker = UnknownEmotionTracker(session_scope=session_scope_for(mock_session))
        await tracker.record("   ")
        mock_session.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_scheduled_failure_is_swallowed(self, mock_session):
        mock_session.execute.side_effect = OperationalError("INSERT", {}, Exception("db down"))
        tracker = UnknownEmotionTracker(session_scope=session_scope_for(mock_session))

        task = tracker.schedule("qwertyfeel")
        assert task is not None
        await tracker.drain()

        assert task.done()
        assert task.exception() is None
        mock_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_drain_waits_for_pending_writes(self, mock_session):
        gate = asyncio.Event()

        async def slow_execute(*args, **kwargs):
            await gate.wait()

        mock_session.execute.side_effect = slow_execute
        tracker = UnknownEmotionTracker(session_scope=session_scope_for(mock_session))
        task = tracker.schedule("qwertyfeel")
        assert not task.done()

        gate.set()
        await tracker.drain()
        assert task.done()

    def test_schedule_without_loop_returns_none(self):
        tracker = UnknownEmotionTracker(session_scope=MagicMock())
        assert tracker.schedule("qwertyfeel") is None


@pytest.mark.asyncio
async def test_list_unknown_emotions_orders_by_last_seen(mock_session):
    rows = [MagicMock(word="qwertyfeel")]
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    mock_session.execute.return_value = result

    assert await list_unknown_emotions(mock_session, limit=5) == rows
    sql = str(mock_session.execute.call_args.args[0].compile(dialect=postgresql.dialect()))
    assert "ORDER BY unknown_emotions.last_seen_at DESC" in sql
