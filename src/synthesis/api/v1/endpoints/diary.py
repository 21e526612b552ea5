"""
Diary Endpoints

ABC behavior diary: composer form and submission for analysis.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from synthesis.api.dependencies import get_app_session
from synthesis.api.v1.schemas import BehaviorLogEntryModel, DiaryStateResponse
from synthesis.domain.errors import DraftValidationError
from synthesis.services.app_session import AppSession
from synthesis.services.gateway_call import GatewayFailure

router = APIRouter()


class UpdateDraftRequest(BaseModel):
    """Set one composer field."""

    field: Literal["antecedent", "behavior", "consequence"] = Field(..., description="ABC field")
    value: str = Field(..., max_length=4000, description="Field text")


class SubmitEntryResponse(BaseModel):
    """The stored entry and the diary after submission."""

    entry: BehaviorLogEntryModel
    diary: DiaryStateResponse


@router.get(
    "/{session_id}/diary",
    response_model=DiaryStateResponse,
    summary="Diary screen state",
)
async def get_diary(
    session: AppSession = Depends(get_app_session),
) -> DiaryStateResponse:
    return DiaryStateResponse(**session.diary.render())


@router.post(
    "/{session_id}/diary/composer",
    response_model=DiaryStateResponse,
    summary="Open the composer",
    responses={409: {"description": "A submission is in progress"}},
)
async def open_composer(
    session: AppSession = Depends(get_app_session),
) -> DiaryStateResponse:
    session.diary.open_composer()
    return DiaryStateResponse(**session.diary.render())


@router.patch(
    "/{session_id}/diary/composer",
    response_model=DiaryStateResponse,
    summary="Update a draft field",
    responses={409: {"description": "A submission is in progress"}},
)
async def update_draft(
    request: UpdateDraftRequest,
    session: AppSession = Depends(get_app_session),
) -> DiaryStateResponse:
    session.diary.update_draft_field(request.field, request.value)
    return DiaryStateResponse(**session.diary.render())


@router.delete(
    "/{session_id}/diary/composer",
    response_model=DiaryStateResponse,
    summary="Cancel the composer",
    responses={409: {"description": "A submission is in progress"}},
)
async def cancel_composer(
    session: AppSession = Depends(get_app_session),
) -> DiaryStateResponse:
    session.diary.cancel_composer()
    return DiaryStateResponse(**session.diary.render())


@router.post(
    "/{session_id}/diary/composer/submit",
    response_model=SubmitEntryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save the draft and analyze it",
    responses={
        409: {"description": "A submission is already in progress"},
        422: {"description": "A draft field is empty"},
        502: {"description": "The model call failed; the draft is kept"},
        503: {"description": "Model credential not configured"},
    },
)
async def submit_entry(
    session: AppSession = Depends(get_app_session),
):
    """
    Submit the draft.

    The entry is stored only after the model returns its analysis.
    If the call fails, nothing is stored and the draft is kept so the
    caregiver can retry without retyping.
    """
    try:
        result = await session.diary.submit()
    except DraftValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "validation_error",
                "message": str(e),
                "missing_fields": list(e.missing_fields),
            },
        )

    diary = DiaryStateResponse(**session.diary.render())

    if isinstance(result, GatewayFailure):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={
                "error": "gateway_error",
                "message": session.diary.last_error,
                "diary": diary.model_dump(mode="json"),
            },
        )

    return SubmitEntryResponse(entry=diary.entries[0], diary=diary)
