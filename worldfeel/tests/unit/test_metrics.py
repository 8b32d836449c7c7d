"""Tests for Prometheus instrumentation of the core components."""

import pytest
from prometheus_client import REGISTRY

from worldfeel.core.errors import WordValidationError
from worldfeel.monitoring.metrics import CONTENT_TYPE_LATEST, render_latest

IP = "203.0.113.10"


def sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


@pytest.mark.asyncio
async def test_submission_outcomes_are_counted(coordinator, clock):
    created = sample("worldfeel_submissions_total", {"status": "created"})
    updated = sample("worldfeel_submissions_total", {"status": "updated"})
    conflict = sample("worldfeel_submissions_total", {"status": "conflict"})

    await coordinator.submit("joy", IP)
    await coordinator.submit("calm", IP)
    clock.advance(minutes=10)
    await coordinator.submit("sad", IP)

    assert sample("worldfeel_submissions_total", {"status": "created"}) == created + 1
    assert sample("worldfeel_submissions_total", {"status": "updated"}) == updated + 1
    assert sample("worldfeel_submissions_total", {"status": "conflict"}) == conflict + 1


@pytest.mark.asyncio
async def test_rejections_are_counted_by_reason(coordinator):
    with pytest.raises(WordValidationError) as exc_info:
        await coordinator.submit("happy1", IP)
    reason = exc_info.value.reason
    before = sample("worldfeel_rejected_submissions_total", {"reason": reason})

    with pytest.raises(WordValidationError):
        await coordinator.submit("happy1", IP)

    assert sample("worldfeel_rejected_submissions_total", {"reason": reason}) == before + 1


@pytest.mark.asyncio
async def test_cache_hits_and_misses(engine):
    misses = sample("worldfeel_stats_cache_lookups_total", {"result": "miss"})
    hits = sample("worldfeel_stats_cache_lookups_total", {"result": "hit"})

    await engine.aggregate()
    await engine.aggregate()

    assert sample("worldfeel_stats_cache_lookups_total", {"result": "miss"}) == misses + 1
    assert sample("worldfeel_stats_cache_lookups_total", {"result": "hit"}) == hits + 1


def test_render_latest_exposes_worldfeel_metrics():
    body, content_type = render_latest()
    assert content_type == CONTENT_TYPE_LATEST
    assert b"worldfeel_submissions_total" in body
