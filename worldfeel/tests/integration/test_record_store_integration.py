"""
Integration tests for the record store and coordinator against PostgreSQL.

Skipped unless TEST_DATABASE_URL points at a disposable database.
"""
import os
from contextlib import asynccontextmanager
from datetime import timedelta

import pytest

from worldfeel.core.aggregation import AggregationEngine, aggregate
from worldfeel.core.expiry import purge_expired
from worldfeel.core.record_store import SubmissionStore
from worldfeel.core.submission_coordinator import SubmissionCoordinator, SubmissionStatus
from worldfeel.core.unknown_emotions import UnknownEmotionTracker, list_unknown_emotions
from worldfeel.tests.stubs.memory_store import TEST_SECRET, FakeClock

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("TEST_DATABASE_URL"), reason="TEST_DATABASE_URL not set"),
]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(db_session):
    return SubmissionStore(db_session)


async def seed(store, clock, words):
    records = []
    for i, word in enumerate(words):
        created = clock.now - timedelta(minutes=len(words) - i)
        records.append(await store.insert(
            word=word,
            identity_hash=f"identity-{i}",
            device_token=None,
            created_at=created,
            expires_at=created + timedelta(hours=24),
        ))
    return records


@pytest.mark.asyncio
async def test_insert_conflict_on_active_identity(store, clock):
    first = await store.insert(
        word="joy", identity_hash="same", device_token=None,
        created_at=clock.now, expires_at=clock.now + timedelta(hours=24),
    )
    second = await store.insert(
        word="calm", identity_hash="same", device_token=None,
        created_at=clock.now, expires_at=clock.now + timedelta(hours=24),
    )
    assert first is not None
    assert second is None


@pytest.mark.asyncio
async def test_insert_overwrites_expired_row(store, clock):
    old_created = clock.now - timedelta(hours=25)
    await store.insert(
        word="sad", identity_hash="same", device_token=None,
        created_at=old_created, expires_at=old_created + timedelta(hours=24),
    )
    fresh = await store.insert(
        word="joy", identity_hash="same", device_token="d",
        created_at=clock.now, expires_at=clock.now + timedelta(hours=24),
    )
    assert fresh is not None
    assert fresh.word == "joy"
    assert fresh.created_at == clock.now
    assert await store.count_active(clock.now) == 1


@pytest.mark.asyncio
async def test_store_aggregate_matches_pure_aggregate(store, clock):
    records = await seed(store, clock, ["joy", "calm", "joy", "sad", "calm", "tired", "joy"])
    engine = AggregationEngine(store, window_size=2, clock=clock)

    for focus in ("joy", "sad", "calm", "tired"):
        expected = aggregate(records, focus_word=focus, now=clock.now, window_size=2)
        assert await engine.compute(clock.now, focus) == expected


@pytest.mark.asyncio
async def test_expired_rows_are_ignored_and_purged(store, clock, db_session):
    await seed(store, clock, ["joy", "calm"])
    later = clock.now + timedelta(hours=24)
    assert await store.count_active(later) == 0

    @asynccontextmanager
    async def scope():
        yield db_session

    assert await purge_expired(later, session_scope=scope) == 2


@pytest.mark.asyncio
async def test_coordinator_end_to_end(store, clock):
    engine = AggregationEngine(store, clock=clock)
    coordinator = SubmissionCoordinator(store, engine, clock=clock, secret=TEST_SECRET)

    created = await coordinator.submit("joy", "203.0.113.10")
    assert created.status is SubmissionStatus.CREATED
    assert created.aggregate.top.word == "joy"

    clock.advance(minutes=4)
    edited = await coordinator.submit("calm", "203.0.113.10")
    assert edited.status is SubmissionStatus.UPDATED
    assert edited.aggregate.total == 1

    clock.advance(minutes=3)
    conflict = await coordinator.submit("joy", "203.0.113.10")
    assert conflict.status is SubmissionStatus.CONFLICT
    assert conflict.record.word == "calm"


@pytest.mark.asyncio
async def test_unknown_emotion_upsert_counts(session_factory):
    @asynccontextmanager
    async def scope():
        async with session_factory() as session:
            yield session
            await session.commit()

    tracker = UnknownEmotionTracker(session_scope=scope)
    await tracker.record("qwertyfeel")
    await tracker.record("QwertyFeel")

    async with session_factory() as session:
        rows = await list_unknown_emotions(session)
    assert [(r.word, r.count) for r in rows] == [("qwertyfeel", 2)]
