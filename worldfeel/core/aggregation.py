"""
Aggregation Engine for the worldfeel service.

Computes word-frequency rankings over active submissions. Ranking order is
count descending, then most recent submission descending, then the word
itself ascending, so ties always resolve the same way.

Only the top RANKING_WINDOW_SIZE words are materialised. A focus word outside
that window gets an exact count but its rank only counts words with strictly
more submissions, which can place it level with words that win the
tie-break against it.

Percentiles use one denominator everywhere, the number of distinct active
words D:

    percentile = max(1, round_half_up((D - rank + 1) / D * 100))
"""
import logging
import math
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence

from worldfeel.config.settings import settings
from worldfeel.core.cache import ResultCache, build_cache_key
from worldfeel.core.colors import generate_palette, word_to_color
from worldfeel.core.emotion_table import SENTINEL_WORD
from worldfeel.core.record_store import SubmissionStore, WordTally
from worldfeel.core.unknown_emotions import UnknownEmotionTracker
from worldfeel.models.dtos import AggregateResult, WordCount, YourWordStats
from worldfeel.monitoring.metrics import AGGREGATE_DURATION, record_cache_lookup, record_unknown_emotion

logger = logging.getLogger(__name__)

PALETTE_SIZE = 5


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentile_for_rank(rank: int, distinct_words: int) -> int:
    if distinct_words <= 0:
        return 0
    return max(1, round_half_up((distinct_words - rank + 1) / distinct_words * 100))


def rank_tallies(tallies: Iterable[WordTally]) -> List[WordTally]:
    """Sort tallies by count desc, last_created_at desc, word asc."""
    # Two stable passes: the word tie-break first, then the primary keys.
    ordered = sorted(tallies, key=lambda t: t.word)
    ordered.sort(key=lambda t: (t.count, t.last_created_at), reverse=True)
    return ordered


def tally_records(records: Iterable, now: Optional[datetime] = None) -> List[WordTally]:
    """
    Group records by word, skipping expired ones when `now` is given.

    Records only need `word`, `created_at` and `expires_at` attributes.
    """
    counts: dict[str, int] = {}
    latest: dict[str, datetime] = {}
    for record in records:
        if now is not None and record.expires_at <= now:
            continue
        counts[record.word] = counts.get(record.word, 0) + 1
        if record.word not in latest or record.created_at > latest[record.word]:
            latest[record.word] = record.created_at
    return [WordTally(word=w, count=c, last_created_at=latest[w]) for w, c in counts.items()]


def build_aggregate(
    window: Sequence[WordTally],
    total: int,
    your_word: Optional[YourWordStats] = None,
) -> AggregateResult:
    """Assemble an AggregateResult from an already ranked window."""
    top10 = [WordCount(word=t.word, count=t.count) for t in window[:10]]
    top5 = top10[:5]
    top = top5[0] if top5 else WordCount(word=SENTINEL_WORD, count=0)

    color = word_to_color(top.word)
    return AggregateResult(
        total=total,
        top=top,
        top5=top5,
        top10=top10,
        your_word=your_word,
        color_hex=color.hex,
        top_palette=generate_palette(color.hex, PALETTE_SIZE),
    )


def _stats_from_window(window: Sequence[WordTally], focus_word: str, distinct_words: int) -> Optional[YourWordStats]:
    for index, tally in enumerate(window):
        if tally.word == focus_word:
            rank = index + 1
            return YourWordStats(
                word=tally.word,
                count=tally.count,
                rank=rank,
                percentile=percentile_for_rank(rank, distinct_words),
            )
    return None


def aggregate(
    active_records: Iterable,
    focus_word: Optional[str] = None,
    now: Optional[datetime] = None,
    window_size: Optional[int] = None,
) -> AggregateResult:
    """
    Compute an AggregateResult from records held in memory.

    Same semantics as AggregationEngine.aggregate without cache or store.
    """
    window_size = window_size or settings.RANKING_WINDOW_SIZE
    ranked = rank_tallies(tally_records(active_records, now))
    total = sum(t.count for t in ranked)
    window = ranked[:window_size]

    your_word = None
    if focus_word:
        your_word = _stats_from_window(window, focus_word, len(ranked))
        if your_word is None:
            match = next((t for t in ranked if t.word == focus_word), None)
            if match is not None:
                rank = 1 + sum(1 for t in ranked if t.count > match.count)
                your_word = YourWordStats(
                    word=match.word,
                    count=match.count,
                    rank=rank,
                    percentile=percentile_for_rank(rank, len(ranked)),
                )
    return build_aggregate(window, total, your_word)


class AggregationEngine:
    """
    Store-backed aggregation with an optional short-lived result cache.

    Args:
        store: Record store bound to the current request's session.
        cache: Process-wide ResultCache, or None to always recompute.
        unknown_tracker: Receives top words without a color mapping.
        window_size: Number of ranked words to materialise.
        clock: Returns the current aware UTC datetime.
    """

    def __init__(
        self,
        store: SubmissionStore,
        cache: Optional[ResultCache] = None,
        unknown_tracker: Optional[UnknownEmotionTracker] = None,
        window_size: Optional[int] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.store = store
        self.cache = cache
        self.unknown_tracker = unknown_tracker
        self.window_size = window_size or settings.RANKING_WINDOW_SIZE
        self.clock = clock

    async def aggregate(
        self,
        focus_word: Optional[str] = None,
        device_token: Optional[str] = None,
        use_cache: bool = True,
    ) -> AggregateResult:
        """
        Stats for the world, personalised by focus word or device token.

        When no focus word is given but a device token is, the device's latest
        active word becomes the focus word. With `use_cache=False` the cache is
        neither read nor written, for results computed inside an uncommitted
        transaction.
        """
        key = build_cache_key(focus_word, device_token)
        if use_cache and self.cache is not None:
            cached = self.cache.get(key)
            record_cache_lookup(cached is not None)
            if cached is not None:
                return cached

        now = self.clock()
        if not focus_word and device_token:
            focus_word = await self.store.latest_word_for_device(device_token, now)

        with AGGREGATE_DURATION.time():
            result = await self.compute(now, focus_word)
        if use_cache and self.cache is not None:
            self.cache.set(key, result)
        return result

    async def compute(self, now: datetime, focus_word: Optional[str] = None) -> AggregateResult:
        window = await self.store.ranked_word_tallies(now, self.window_size)
        total = await self.store.count_active(now)

        your_word = None
        if focus_word:
            your_word = await self._your_word(window, focus_word, now)

        result = build_aggregate(window, total, your_word)
        self._track_if_unknown(result.top.word)
        return result

    async def _distinct_words(self, window: Sequence[WordTally], now: datetime) -> int:
        if len(window) < self.window_size:
            return len(window)
        return await self.store.count_distinct_words(now)

    async def _your_word(self, window: Sequence[WordTally], focus_word: str, now: datetime) -> Optional[YourWordStats]:
        if any(t.word == focus_word for t in window):
            return _stats_from_window(window, focus_word, await self._distinct_words(window, now))

        count = await self.store.count_word(focus_word, now)
        if count == 0:
            return None
        higher = await self.store.count_words_above(count, now)
        rank = higher + 1
        distinct_words = await self.store.count_distinct_words(now)
        logger.debug("Focus word '%s' outside ranking window: count=%d rank=%d", focus_word, count, rank)
        return YourWordStats(
            word=focus_word,
            count=count,
            rank=rank,
            percentile=percentile_for_rank(rank, distinct_words),
        )

    def _track_if_unknown(self, word: str) -> None:
        if self.unknown_tracker is None or word_to_color(word).matched:
            return
        logger.info("No color mapping for top word '%s'; using default", word)
        record_unknown_emotion()
        try:
            self.unknown_tracker.schedule(word)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("Could not schedule unknown emotion tracking for '%s': %s", word, e)
