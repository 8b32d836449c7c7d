import pytest

from worldfeel.core.emotion_search import clamp_limit, search_emotions
from worldfeel.core.emotion_table import EMOTIONS


class TestFuzzyMatching:
    def test_adjacent_transpositions_count_once(self):
        # two swaps away from "calm"
        assert "calm" in search_emotions("acml")

    def test_closer_misspellings_rank_first(self):
        results = search_emotions("hapy")
        assert results[0] == "happy"

    def test_nothing_within_distance(self):
        assert search_emotions("zzzzzz") == []


class TestClampLimit:
    @pytest.mark.parametrize("raw,expected", [(0, 1), (-5, 1), (5, 5), (500, 100), ("7", 7), ("abc", 20), (None, 20)])
    def test_clamp(self, raw, expected):
        assert clamp_limit(raw) == expected


class TestSearchEmotions:
    def test_empty_query(self):
        assert search_emotions("") == []
        assert search_emotions("   ") == []

    def test_exact_match_first_then_prefix(self):
        results = search_emotions("joy")
        assert results[:2] == ["joy", "joyful"]

    def test_aliases_collapse_to_canonical_key(self):
        results = search_emotions("anx")
        assert results[0] == "anxious"
        assert results.count("anxious") == 1

    def test_misspelling_found_by_distance(self):
        assert search_emotions("anxous")[0] == "anxious"
        assert "calm" in search_emotions("clam")

    def test_results_are_canonical_and_unique(self):
        results = search_emotions("a", limit=100)
        assert len(results) == len(set(results))
        assert all(word in EMOTIONS for word in results)

    @pytest.mark.parametrize("limit", [1, 3, 10])
    def test_limit_respected(self, limit):
        assert len(search_emotions("joy", limit=limit)) <= limit
        assert len(search_emotions("s", limit=limit)) == limit
