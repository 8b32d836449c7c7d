"""
Core components for the worldfeel service.
"""

from .aggregation import AggregationEngine, aggregate
from .cache import ResultCache, build_cache_key
from .errors import WordValidationError, WorldFeelError
from .record_store import SubmissionStore, WordTally
from .submission_coordinator import SubmissionCoordinator, SubmissionOutcome, SubmissionStatus
from .unknown_emotions import UnknownEmotionTracker

__all__ = [
    "AggregationEngine",
    "aggregate",
    "ResultCache",
    "build_cache_key",
    "WordValidationError",
    "WorldFeelError",
    "SubmissionStore",
    "WordTally",
    "SubmissionCoordinator",
    "SubmissionOutcome",
    "SubmissionStatus",
    "UnknownEmotionTracker",
]
