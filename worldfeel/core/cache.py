"""
Short-lived in-process cache for stats aggregates.

Expired entries are dropped when read and swept whenever a new entry is
stored. The whole cache is cleared after every committed submission, since one
new submission can change every ranking. The cache is not
shared between processes; other instances may serve results up to one TTL old.
"""

import time
from threading import Lock
from typing import Callable, Dict, Optional

from worldfeel.models.dtos import AggregateResult


def build_cache_key(focus_word: Optional[str] = None, device_token: Optional[str] = None) -> str:
    """Serialize the parameters that distinguish one stats query from another."""
    return "|".join([focus_word or "", device_token or ""])


class ResultCache:
    """TTL cache of AggregateResult values keyed by query shape."""

    def __init__(self, ttl_seconds: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, tuple[AggregateResult, float]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[AggregateResult]:
        """Get value from cache if not expired"""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at > self._clock():
                return value
            del self._entries[key]
            return None

    def set(self, key: str, value: AggregateResult) -> None:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            self._entries[key] = (value, now + self.ttl_seconds)

    def _evict_expired(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]

    def invalidate_all(self) -> None:
        """Clear all cache entries"""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
