"""
World stats endpoint.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response

from worldfeel.api.dependencies import cookie_device_token, get_aggregation_engine
from worldfeel.core.aggregation import AggregationEngine
from worldfeel.core.vocabulary import normalize_word, resolve_emotion_key
from worldfeel.models.dtos import StatsResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _focus_word(your_word: Optional[str]) -> Optional[str]:
    """Resolve a caller-supplied word the same way submissions are stored."""
    if your_word is None:
        return None
    word = normalize_word(your_word)
    if word.isascii():
        return resolve_emotion_key(word) or word
    return word


@router.get(
    "/stats",
    response_model=StatsResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="How the world feels",
)
async def get_stats(
    request: Request,
    response: Response,
    your_word: Optional[str] = Query(None, alias="yourWord", description="Word to rank against the world"),
    device_id: Optional[UUID] = Query(None, alias="deviceId", description="Device whose latest word to rank"),
    engine: AggregationEngine = Depends(get_aggregation_engine),
) -> StatsResponse:
    """
    Current aggregate over active submissions.

    Without `yourWord`, the caller's latest active word (found by `deviceId`
    or the device cookie) is ranked instead. A malformed `yourWord` or
    `deviceId` is rejected with 400.
    """
    device_token = str(device_id) if device_id else cookie_device_token(request)
    result = await engine.aggregate(focus_word=_focus_word(your_word), device_token=device_token)
    response.headers["Cache-Control"] = "no-store"
    return StatsResponse(success=True, data=result)
