"""Prometheus metrics for monitoring the worldfeel service."""

import logging

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

logger = logging.getLogger(__name__)

# Define metrics
SUBMISSIONS = Counter(
    "worldfeel_submissions_total",
    "Submissions handled, by outcome",
    ["status"],
)

REJECTED_SUBMISSIONS = Counter(
    "worldfeel_rejected_submissions_total",
    "Submissions rejected before reaching the store",
    ["reason"],
)

STATS_CACHE_LOOKUPS = Counter(
    "worldfeel_stats_cache_lookups_total",
    "Stats cache lookups",
    ["result"],
)

EXPIRED_PURGED = Counter(
    "worldfeel_expired_submissions_purged_total",
    "Expired submissions deleted by the sweeper",
)

UNKNOWN_EMOTIONS_SEEN = Counter(
    "worldfeel_unknown_emotions_seen_total",
    "Top words that had no color mapping",
)

AGGREGATE_DURATION = Histogram(
    "worldfeel_aggregate_duration_seconds",
    "Time spent computing an aggregate from the store",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


def record_submission(status: str) -> None:
    SUBMISSIONS.labels(status=status).inc()


def record_rejection(reason: str) -> None:
    REJECTED_SUBMISSIONS.labels(reason=reason).inc()


def record_cache_lookup(hit: bool) -> None:
    STATS_CACHE_LOOKUPS.labels(result="hit" if hit else "miss").inc()


def record_purged(count: int) -> None:
    if count > 0:
        EXPIRED_PURGED.inc(count)


def record_unknown_emotion() -> None:
    UNKNOWN_EMOTIONS_SEEN.inc()


def render_latest() -> tuple[bytes, str]:
    """Current metrics in the Prometheus text format, with its content type."""
    return generate_latest(), CONTENT_TYPE_LATEST
