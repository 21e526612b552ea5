"""
Session Endpoints

App session lifecycle and tab navigation.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field

from synthesis.api.dependencies import get_app_session, get_registry
from synthesis.api.v1.schemas import CreateSessionResponse, NavigationResponse
from synthesis.domain.enums.screen_kind import ScreenKind
from synthesis.domain.errors import SessionNotFoundError
from synthesis.services.app_session import AppSession, SessionRegistry

router = APIRouter()


class SwitchScreenRequest(BaseModel):
    """Request to change the active tab."""

    screen: ScreenKind = Field(..., description="Screen to show")


@router.post(
    "",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start an app session",
)
async def create_session(
    registry: SessionRegistry = Depends(get_registry),
) -> CreateSessionResponse:
    """
    Start a session with an empty diary.

    All diary entries live only as long as the session.
    """
    session = registry.create()

    return CreateSessionResponse(
        session_id=session.id,
        active_screen=session.navigation.active,
        created_at=session.created_at,
    )


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="End an app session",
)
async def close_session(
    session_id: UUID,
    registry: SessionRegistry = Depends(get_registry),
) -> Response:
    """End the session and discard its diary."""
    try:
        registry.close(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{session_id}/navigation",
    response_model=NavigationResponse,
    summary="Render the active screen",
)
async def get_navigation(
    session: AppSession = Depends(get_app_session),
) -> NavigationResponse:
    return NavigationResponse(**session.navigation.render())


@router.put(
    "/{session_id}/navigation",
    response_model=NavigationResponse,
    summary="Switch tab",
)
async def switch_screen(
    request: SwitchScreenRequest,
    session: AppSession = Depends(get_app_session),
) -> NavigationResponse:
    """Make another screen active. Screen state is untouched."""
    session.navigation.switch_to(request.screen)
    return NavigationResponse(**session.navigation.render())
