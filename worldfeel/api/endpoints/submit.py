"""
Submission endpoint.

Accepts one word from a visitor and returns the resulting world aggregate.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from worldfeel.api.dependencies import cookie_device_token, get_submission_coordinator
from worldfeel.config.settings import settings
from worldfeel.core.errors import WordValidationError
from worldfeel.core.identity import client_address
from worldfeel.core.submission_coordinator import SubmissionCoordinator, SubmissionOutcome, SubmissionStatus
from worldfeel.models.dtos import ApiResponse, SubmissionRequest, SubmissionResponse

router = APIRouter()
logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Thank you for sharing how you feel!"
UPDATED_MESSAGE = "Your feeling has been updated."
CONFLICT_ERROR = "Already submitted"


def _response_for(outcome: SubmissionOutcome) -> JSONResponse:
    if outcome.status is SubmissionStatus.CONFLICT:
        body = SubmissionResponse(
            success=False,
            error=CONFLICT_ERROR,
            message=f"You already shared '{outcome.record.word}'. You can share again once it expires.",
            data=outcome.aggregate,
            can_edit=False,
            edit_window_minutes=settings.EDIT_WINDOW_MINUTES,
        )
        status_code = status.HTTP_409_CONFLICT
    else:
        created = outcome.status is SubmissionStatus.CREATED
        body = SubmissionResponse(
            success=True,
            data=outcome.aggregate,
            message=CREATED_MESSAGE if created else UPDATED_MESSAGE,
            can_edit=True,
            edit_window_minutes=settings.EDIT_WINDOW_MINUTES,
            edit_window_remaining_seconds=outcome.edit_window_remaining_seconds,
        )
        status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK

    response = JSONResponse(status_code=status_code, content=body.to_json_dict())
    if outcome.issued_device_token:
        response.set_cookie(
            key=settings.DEVICE_COOKIE_NAME,
            value=outcome.issued_device_token,
            max_age=settings.DEVICE_COOKIE_MAX_AGE_DAYS * 24 * 60 * 60,
            httponly=True,
            samesite="lax",
        )
    return response


@router.post("/submit", summary="Share how you feel")
async def submit_word(
    payload: SubmissionRequest,
    request: Request,
    coordinator: SubmissionCoordinator = Depends(get_submission_coordinator),
) -> JSONResponse:
    """
    Submit one word describing how the visitor feels.

    Returns 201 for a new submission, 200 for an edit inside the edit window,
    409 when an earlier submission can no longer be edited, and 400 when the
    word is rejected.
    """
    device_token = str(payload.device_id) if payload.device_id else cookie_device_token(request)
    try:
        outcome = await coordinator.submit(payload.word, client_address(request), device_token)
    except WordValidationError as e:
        logger.info("Rejected submission (%s): %s", e.reason, e.message)
        body = ApiResponse(success=False, error="Invalid input", message=e.message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.to_json_dict())

    return _response_for(outcome)
