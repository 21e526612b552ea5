"""
Crisis Endpoints

SOS screen: request calm, step-ordered guidance and dismiss it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from synthesis.api.dependencies import get_app_session
from synthesis.api.v1.schemas import CrisisStateResponse
from synthesis.domain.errors import InvalidCrisisTransitionError
from synthesis.services.app_session import AppSession

router = APIRouter()


class TriggerHelpRequest(BaseModel):
    """Optional live description of the situation."""

    situation: Optional[str] = Field(
        default=None,
        max_length=2000,
        description="What is happening right now (defaults to a generic meltdown)",
    )


@router.get(
    "/{session_id}/crisis",
    response_model=CrisisStateResponse,
    summary="SOS screen state",
)
async def get_crisis(
    session: AppSession = Depends(get_app_session),
) -> CrisisStateResponse:
    return CrisisStateResponse(**session.crisis.render())


@router.post(
    "/{session_id}/crisis/help",
    response_model=CrisisStateResponse,
    summary="Request crisis advice",
    responses={
        409: {"description": "Advice is already requested or shown"},
        503: {"description": "Model credential not configured"},
    },
)
async def trigger_help(
    request: Optional[TriggerHelpRequest] = None,
    session: AppSession = Depends(get_app_session),
) -> CrisisStateResponse:
    """
    Ask the model for a crisis protocol.

    Returns the advice, or the breathing screen with a failure notice
    if the model call failed.
    """
    situation = request.situation if request else None
    try:
        await session.crisis.trigger_help(situation)
    except InvalidCrisisTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return CrisisStateResponse(**session.crisis.render())


@router.post(
    "/{session_id}/crisis/dismiss",
    response_model=CrisisStateResponse,
    summary="Dismiss crisis advice",
)
async def dismiss_advice(
    session: AppSession = Depends(get_app_session),
) -> CrisisStateResponse:
    """Situation is under control; return to breathing guidance."""
    try:
        session.crisis.dismiss()
    except InvalidCrisisTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    return CrisisStateResponse(**session.crisis.render())
