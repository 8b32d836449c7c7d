"""
Type-ahead search over the emotion vocabulary.
"""
from typing import List

from rapidfuzz.distance import OSA

from worldfeel.core.vocabulary import resolve_emotion_key, search_terms

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MAX_FUZZY_DISTANCE = 2


def clamp_limit(limit) -> int:
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return min(max(value, 1), MAX_LIMIT)


def search_emotions(query: str, limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Suggest canonical emotion keys for a partial query.

    Terms (canonical keys and aliases) are ranked as prefix matches, then
    substring matches, then close misspellings by ascending edit distance.
    Each canonical key appears at most once. A query that already resolves to
    an emotion puts that emotion first.
    """
    limit = clamp_limit(limit)
    q = (query or "").strip().lower()
    if not q:
        return []

    terms = search_terms()
    prefix = [t for t in terms if t.startswith(q)]
    substring = [t for t in terms if not t.startswith(q) and q in t]
    fuzzy = []
    for term in terms:
        if q in term:
            continue
        distance = OSA.distance(q, term, score_cutoff=MAX_FUZZY_DISTANCE)
        if distance <= MAX_FUZZY_DISTANCE:
            fuzzy.append((distance, term))
    # sort is stable, so equal distances keep alphabetical order
    fuzzy.sort(key=lambda item: item[0])

    results: List[str] = []
    seen = set()
    query_key = resolve_emotion_key(q)
    if query_key:
        results.append(query_key)
        seen.add(query_key)

    for term in prefix + substring + [t for _, t in fuzzy]:
        if len(results) >= limit:
            break
        key = resolve_emotion_key(term)
        if key is None or key in seen:
            continue
        results.append(key)
        seen.add(key)
    return results
