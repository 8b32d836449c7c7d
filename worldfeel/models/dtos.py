"""
Pydantic Data Transfer Objects (DTOs) for the worldfeel service.

These models are used for API request/response validation and for passing
aggregates between the core components. JSON field names are camelCase to
match what the web client expects.
"""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase while accepting snake_case too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WordCount(CamelModel):
    word: str
    count: int


class YourWordStats(WordCount):
    """Rank and percentile of the caller's own word."""
    rank: int
    percentile: int


class AggregateResult(CamelModel):
    """
    Snapshot of the world's mood over active submissions.

    `top` is the sentinel word with count 0 when nothing is active.
    """
    total: int
    top: WordCount
    top5: List[WordCount] = Field(default_factory=list)
    top10: List[WordCount] = Field(default_factory=list)
    your_word: Optional[YourWordStats] = None
    color_hex: str
    top_palette: List[str] = Field(default_factory=list)


class SubmissionRequest(CamelModel):
    """Body of POST /api/submit. Word shape is checked by the vocabulary gate."""
    word: str = Field(..., max_length=64, description="How the visitor feels, one word.")
    device_id: Optional[UUID] = Field(None, description="Optional device identifier.")

    @field_validator("device_id", mode="before")
    @classmethod
    def blank_device_id_is_absent(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class SubmissionRecordDTO(CamelModel):
    """Mirrors SubmissionORM for internal transfer; never exposes the identity hash over HTTP."""
    id: Optional[int] = None
    word: str
    identity_hash: str
    device_token: Optional[str] = None
    created_at: datetime
    expires_at: datetime
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiResponse(CamelModel):
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    message: Optional[str] = None


class StatsResponse(ApiResponse):
    data: AggregateResult


class SubmissionResponse(ApiResponse):
    data: Optional[AggregateResult] = None
    can_edit: Optional[bool] = None
    edit_window_minutes: Optional[int] = None
    edit_window_remaining_seconds: Optional[int] = None


class UnknownEmotionDTO(CamelModel):
    word: str
    count: int
    first_seen_at: datetime
    last_seen_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
