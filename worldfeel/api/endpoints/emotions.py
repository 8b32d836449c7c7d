"""
Emotion vocabulary endpoints: type-ahead search and color lookup.
"""

from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from worldfeel.core.colors import get_emotion_color
from worldfeel.core.emotion_search import DEFAULT_LIMIT, search_emotions
from worldfeel.models.dtos import ApiResponse

router = APIRouter()


@router.get("/emotions/search", summary="Suggest emotion words")
async def search(
    q: Optional[str] = Query(None, max_length=64, description="Partial word"),
    limit: Optional[str] = Query(None, description="Maximum suggestions, clamped to 1..100"),
) -> dict:
    """Canonical emotion keys matching `q` by prefix, substring, then spelling distance."""
    results = search_emotions(q or "", limit if limit is not None else DEFAULT_LIMIT)
    return ApiResponse(success=True, data=results).to_json_dict()


@router.get("/color", summary="Color for an emotion word")
async def color(word: str = Query(..., min_length=1, max_length=64)):
    hex_value = get_emotion_color(word)
    if hex_value is None:
        body = ApiResponse(success=False, error="Unknown emotion")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=body.to_json_dict())
    return ApiResponse(success=True, data={"hex": hex_value}).to_json_dict()
