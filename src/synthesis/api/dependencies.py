"""FastAPI dependencies shared by the v1 endpoints."""

from uuid import UUID

from fastapi import Depends, HTTPException, Request, status

from synthesis.config.settings import Settings
from synthesis.domain.errors import SessionNotFoundError
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.services.app_session import AppSession, SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    return request.app.state.registry


def get_gateway(request: Request) -> AIGateway:
    return request.app.state.gateway


def get_app_session(
    session_id: UUID,
    registry: SessionRegistry = Depends(get_registry),
) -> AppSession:
    """Resolve the path's session or raise 404."""
    try:
        return registry.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
