"""
Exception types raised by the worldfeel core.

Conflicts are not exceptions; they are a normal submission outcome.
"""


class WorldFeelError(Exception):
    """Base class for errors raised by the core components."""


class WordValidationError(WorldFeelError):
    """
    A submitted word was rejected before any store access.

    Attributes:
        reason: Machine-readable reason ("shape", "vocabulary", "profanity").
        message: Human-readable explanation safe to show to the visitor.
    """

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message
