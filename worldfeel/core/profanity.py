"""
Minimal profanity filter for single-word submissions.

Words are compared after lowercasing and removing everything but a-z, and
common leetspeak digits are folded back to letters first.
"""
import re

from worldfeel.core.errors import WordValidationError

# Any word containing one of these roots is rejected.
BLOCKED_ROOTS = frozenset({
    "fuck",
    "shit",
    "cunt",
    "motherf",
    "wank",
})

# Rejected only as whole words, the roots are too common inside clean words.
BLOCKED_WORDS = frozenset({
    "ass",
    "asshole",
    "bastard",
    "bitch",
    "bitchy",
    "bollocks",
    "cock",
    "dick",
    "dickhead",
    "piss",
    "prick",
    "slut",
    "twat",
    "whore",
})

_LEET = str.maketrans({"0": "o", "1": "i", "3": "e", "4": "a", "5": "s", "7": "t", "@": "a", "$": "s"})
_NON_LETTERS = re.compile(r"[^a-z]")


def _fold(word: str) -> str:
    return _NON_LETTERS.sub("", word.lower().translate(_LEET))


def is_profane(word: str) -> bool:
    folded = _fold(word)
    if not folded:
        return False
    if folded in BLOCKED_WORDS:
        return True
    return any(root in folded for root in BLOCKED_ROOTS)


def ensure_clean(word: str) -> None:
    """Raise WordValidationError if the word is profane."""
    if is_profane(word):
        raise WordValidationError("profanity", "Please choose a different word.")
