import hashlib

import pytest
from datetime import date
from unittest.mock import MagicMock

from worldfeel.core.cache import ResultCache, build_cache_key
from worldfeel.core.identity import client_address, day_salt, new_device_token, resolve_identity
from worldfeel.models.dtos import AggregateResult, WordCount

SECRET = "x" * 32


class TestResolveIdentity:
    def test_deterministic_hex(self):
        first = resolve_identity("203.0.113.10", date(2025, 8, 18), SECRET)
        second = resolve_identity("203.0.113.10", date(2025, 8, 18), SECRET)
        assert first == second
        assert len(first) == 64
        assert first == first.lower()

    def test_rotates_daily(self):
        today = resolve_identity("203.0.113.10", date(2025, 8, 18), SECRET)
        tomorrow = resolve_identity("203.0.113.10", date(2025, 8, 19), SECRET)
        assert today != tomorrow

    def test_depends_on_address_and_secret(self):
        base = resolve_identity("203.0.113.10", date(2025, 8, 18), SECRET)
        assert resolve_identity("203.0.113.11", date(2025, 8, 18), SECRET) != base
        assert resolve_identity("203.0.113.10", date(2025, 8, 18), "y" * 32) != base

    def test_malformed_address_is_opaque(self):
        assert len(resolve_identity("not an ip", date(2025, 8, 18), SECRET)) == 64

    def test_day_salt_uses_iso_date(self):
        expected = hashlib.sha256(("2025-08-18" + SECRET).encode()).hexdigest()
        assert day_salt(date(2025, 8, 18), SECRET) == expected


class TestClientAddress:
    def _request(self, forwarded=None, host="10.0.0.1"):
        request = MagicMock()
        request.headers = {"x-forwarded-for": forwarded} if forwarded else {}
        request.client = MagicMock(host=host) if host else None
        return request

    def test_first_forwarded_hop_when_trusted(self):
        request = self._request("203.0.113.10, 10.0.0.2")
        assert client_address(request, trust_proxy=True) == "203.0.113.10"

    def test_forwarded_ignored_when_untrusted(self):
        request = self._request("203.0.113.10")
        assert client_address(request, trust_proxy=False) == "10.0.0.1"

    def test_fallback_without_client(self):
        assert client_address(self._request(host=None), trust_proxy=True) == "0.0.0.0"


def test_new_device_token_is_unique():
    assert new_device_token() != new_device_token()


def _result(total=1):
    return AggregateResult(total=total, top=WordCount(word="joy", count=total), color_hex="#FFEB3B")


class TestResultCache:
    def test_key_shape(self):
        assert build_cache_key() == "|"
        assert build_cache_key("joy") == "joy|"
        assert build_cache_key(None, "dev") == "|dev"
        assert build_cache_key("joy", "dev") == "joy|dev"

    def test_get_within_ttl(self, result_cache):
        value = _result()
        result_cache.set("k", value)
        assert result_cache.get("k") is value

    def test_expired_entry_evicted_on_read(self, result_cache, cache_clock):
        result_cache.set("k", _result())
        cache_clock.value += 5.0
        assert result_cache.get("k") is None
        assert len(result_cache) == 0

    def test_set_sweeps_expired_entries(self, result_cache, cache_clock):
        for i in range(1000):
            result_cache.set(build_cache_key(None, f"device-{i}"), _result())
        cache_clock.value += 3600

        result_cache.set("|fresh", _result())

        assert len(result_cache) == 1
        assert result_cache.get("|fresh") is not None

    def test_set_keeps_live_entries(self, result_cache, cache_clock):
        result_cache.set("a", _result())
        cache_clock.value += 2.0
        result_cache.set("b", _result(2))
        assert len(result_cache) == 2

    def test_invalidate_all(self, result_cache):
        result_cache.set("a", _result())
        result_cache.set("b", _result(2))
        result_cache.invalidate_all()
        assert result_cache.get("a") is None
        assert result_cache.get("b") is None

    def test_missing_key(self):
        assert ResultCache().get("nope") is None
