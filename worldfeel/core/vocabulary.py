"""
Emotion vocabulary gate.

Normalizes visitor input and resolves it to a canonical emotion key. Anything
that cannot be resolved is rejected before it reaches the record store.
"""
import re
from functools import lru_cache
from typing import Optional

from worldfeel.core.emotion_table import EMOTION_ALIASES, EMOTIONS
from worldfeel.core.errors import WordValidationError

MAX_WORD_LENGTH = 20

# Unicode letters only: \w minus digits and underscore.
_LETTERS_ONLY = re.compile(r"^[^\W\d_]{1,%d}$" % MAX_WORD_LENGTH)
_NON_ASCII_LETTERS = re.compile(r"[^a-z]")
_SUFFIXES = re.compile(r"(ly|ness|ful|ing|ed|ous|ive|al)$")
_SUFFIX_REPLACEMENTS = ("", "e", "ion", "ment", "ness")
_TYPO_FIXES = {"outage": "outrage"}


def is_letters_only(word: str) -> bool:
    return bool(_LETTERS_ONLY.match(word))


def _lookup(candidate: str) -> Optional[str]:
    if candidate in EMOTIONS:
        return candidate
    alias = EMOTION_ALIASES.get(candidate)
    if alias and alias in EMOTIONS:
        return alias
    return None


def resolve_emotion_key(text: str) -> Optional[str]:
    """
    Resolve any input (canonical, alias, or simple suffix variant) to a canonical key.

    Returns None when nothing in the vocabulary matches.
    """
    if not text:
        return None
    key = _NON_ASCII_LETTERS.sub("", text.lower())
    if not key:
        return None
    key = _TYPO_FIXES.get(key, key)

    direct = _lookup(key)
    if direct:
        return direct

    stripped = _SUFFIXES.sub("", key)
    for suffix in _SUFFIX_REPLACEMENTS:
        resolved = _lookup(stripped + suffix)
        if resolved:
            return resolved
    return None


def normalize_word(raw: str) -> str:
    """
    Check the shape of a submitted word and return it trimmed and lowercased.

    Raises:
        WordValidationError: if the word is empty, too long or not letters only.
    """
    word = (raw or "").strip()
    if not word:
        raise WordValidationError("shape", "Word is required")
    if len(word) > MAX_WORD_LENGTH:
        raise WordValidationError("shape", f"Word must be {MAX_WORD_LENGTH} characters or less")
    if not is_letters_only(word):
        raise WordValidationError("shape", "Word must contain only letters")
    return word.lower()


def canonicalize_word(raw: str) -> str:
    """
    Validate a submitted word and resolve it to its canonical emotion key.

    Raises:
        WordValidationError: on bad shape or when the word is not a known emotion.
    """
    word = normalize_word(raw)
    canonical = None if _NON_ASCII_LETTERS.search(word) else resolve_emotion_key(word)
    if canonical is None:
        raise WordValidationError(
            "vocabulary",
            f"We don't recognise '{word}' as a feeling yet. Try another word.",
        )
    return canonical


@lru_cache(maxsize=1)
def search_terms() -> tuple[str, ...]:
    """All searchable terms: canonical keys plus aliases, deduped and sorted."""
    return tuple(sorted(set(EMOTIONS) | set(EMOTION_ALIASES)))
