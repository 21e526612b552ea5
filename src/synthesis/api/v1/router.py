"""
API v1 Router

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

from synthesis.api.v1.endpoints.crisis import router as crisis_router
from synthesis.api.v1.endpoints.diary import router as diary_router
from synthesis.api.v1.endpoints.health import router as health_router
from synthesis.api.v1.endpoints.sessions import router as sessions_router

api_router = APIRouter()

api_router.include_router(
    health_router,
    prefix="/health",
    tags=["Health"],
)

api_router.include_router(
    sessions_router,
    prefix="/sessions",
    tags=["Sessions"],
)

api_router.include_router(
    diary_router,
    prefix="/sessions",
    tags=["Diary"],
)

api_router.include_router(
    crisis_router,
    prefix="/sessions",
    tags=["Crisis"],
)
