"""
Models package for the worldfeel service.

This package contains SQLAlchemy ORM models and Pydantic DTOs.
"""

# Ensure all ORM models are registered with the Base metadata when this package is imported.
from . import base
from . import submission_orm
from . import unknown_emotion_orm

from .base import Base
from .submission_orm import SubmissionORM
from .unknown_emotion_orm import UnknownEmotionORM

from .dtos import (
    AggregateResult,
    ApiResponse,
    StatsResponse,
    SubmissionRecordDTO,
    SubmissionRequest,
    SubmissionResponse,
    UnknownEmotionDTO,
    WordCount,
    YourWordStats,
)

__all__ = [
    # Base
    "Base",
    # ORMs
    "SubmissionORM",
    "UnknownEmotionORM",
    # DTOs
    "AggregateResult",
    "ApiResponse",
    "StatsResponse",
    "SubmissionRecordDTO",
    "SubmissionRequest",
    "SubmissionResponse",
    "UnknownEmotionDTO",
    "WordCount",
    "YourWordStats",
]
