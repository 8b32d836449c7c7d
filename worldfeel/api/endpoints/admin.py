"""
Curation endpoints. Not authenticated; expose them only on trusted networks.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from worldfeel.core.unknown_emotions import list_unknown_emotions
from worldfeel.models.dtos import ApiResponse, UnknownEmotionDTO
from worldfeel.utils.db_session import get_db_session

router = APIRouter()

UNKNOWN_EMOTIONS_LIMIT = 100


@router.get("/admin/unknown-emotions", summary="Recently seen words without a color")
async def unknown_emotions(session: AsyncSession = Depends(get_db_session)) -> dict:
    rows = await list_unknown_emotions(session, limit=UNKNOWN_EMOTIONS_LIMIT)
    items = [UnknownEmotionDTO.model_validate(row).to_json_dict() for row in rows]
    return ApiResponse(success=True, data=items).to_json_dict()
