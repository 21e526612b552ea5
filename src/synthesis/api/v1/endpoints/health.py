"""
Health Check Endpoints

Liveness and readiness for load balancers and monitoring.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from synthesis import __version__
from synthesis.api.dependencies import get_app_settings, get_gateway
from synthesis.config.settings import Settings
from synthesis.infrastructure.llm.gateway import AIGateway

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    environment: str


class ReadinessResponse(BaseModel):
    """Readiness check response with component health."""

    ready: bool
    components: dict


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Returns 200 if the application is running."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.env,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness check",
)
async def readiness_check(
    gateway: AIGateway = Depends(get_gateway),
) -> ReadinessResponse:
    """
    Readiness check.

    The app is ready when the model credential is configured; without
    it diary analysis and SOS advice fail with a configuration error.
    """
    components = {"gateway_configured": gateway.is_configured()}

    return ReadinessResponse(
        ready=components["gateway_configured"],
        components=components,
    )
