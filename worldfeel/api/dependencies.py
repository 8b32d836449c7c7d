"""
FastAPI dependencies wiring the core components to a request.

The result cache and unknown-emotion tracker are process-wide singletons; the
store, engine and coordinator are built per request around its DB session.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from worldfeel.config.settings import settings
from worldfeel.core.aggregation import AggregationEngine
from worldfeel.core.cache import ResultCache
from worldfeel.core.identity import parse_device_token
from worldfeel.core.record_store import SubmissionStore
from worldfeel.core.submission_coordinator import SubmissionCoordinator
from worldfeel.core.unknown_emotions import UnknownEmotionTracker
from worldfeel.utils.db_session import get_db_session


@lru_cache
def get_result_cache() -> ResultCache:
    """Returns the process-wide stats cache."""
    return ResultCache(ttl_seconds=settings.STATS_CACHE_TTL_SECONDS)


@lru_cache
def get_unknown_emotion_tracker() -> UnknownEmotionTracker:
    """Returns the process-wide unknown-emotion tracker."""
    return UnknownEmotionTracker()


async def get_submission_store(session: AsyncSession = Depends(get_db_session)) -> SubmissionStore:
    return SubmissionStore(session)


async def get_aggregation_engine(
    store: SubmissionStore = Depends(get_submission_store),
    cache: ResultCache = Depends(get_result_cache),
    tracker: UnknownEmotionTracker = Depends(get_unknown_emotion_tracker),
) -> AggregationEngine:
    return AggregationEngine(store, cache=cache, unknown_tracker=tracker)


async def get_submission_coordinator(
    store: SubmissionStore = Depends(get_submission_store),
    engine: AggregationEngine = Depends(get_aggregation_engine),
    cache: ResultCache = Depends(get_result_cache),
) -> SubmissionCoordinator:
    return SubmissionCoordinator(store, engine, cache=cache)


def cookie_device_token(request: Request) -> Optional[str]:
    """Device token from the device cookie; malformed values are ignored."""
    return parse_device_token(request.cookies.get(settings.DEVICE_COOKIE_NAME))
