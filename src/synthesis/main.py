"""
Synthesis API

Builds the FastAPI app: the model gateway and the app session registry
live on app.state for the lifetime of the process, and every open
session is closed on shutdown.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from synthesis import __version__
from synthesis.api.middleware.error_handler import ErrorHandlerMiddleware
from synthesis.api.v1.router import api_router
from synthesis.config import Settings, get_settings
from synthesis.config.logging_config import configure_logging, get_logger
from synthesis.domain.errors import GatewayConfigurationError, SubmissionInProgressError
from synthesis.infrastructure.llm.gateway import AIGateway, create_gateway
from synthesis.infrastructure.metrics.prometheus_metrics import metrics_router, update_system_info
from synthesis.infrastructure.monitoring.sentry_integration import init_sentry
from synthesis.services.app_session import SessionRegistry

logger = get_logger(__name__)


async def gateway_configuration_error_handler(
    request: Request,
    exc: GatewayConfigurationError,
) -> JSONResponse:
    """Missing model credential: fatal until the process is reconfigured."""
    logger.error(
        "Gateway not configured",
        path=request.url.path,
        provider=exc.provider,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "error": "configuration_error",
            "message": str(exc),
        },
    )


async def submission_in_progress_handler(
    request: Request,
    exc: SubmissionInProgressError,
) -> JSONResponse:
    """The diary composer is locked until the pending analysis returns."""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


def create_application(
    settings: Optional[Settings] = None,
    gateway: Optional[AIGateway] = None,
) -> FastAPI:
    """
    Build the app.

    Args:
        settings: Defaults to the environment and .env
        gateway: Defaults to Gemini built from settings; tests pass a fake
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting Synthesis application",
            env=settings.env,
            version=__version__,
        )

        init_sentry(settings)
        update_system_info(settings.env, __version__)

        app_gateway = gateway or create_gateway(settings)
        if not app_gateway.is_configured():
            logger.warning("Model credential missing; diary analysis and SOS advice are unavailable")

        app.state.settings = settings
        app.state.gateway = app_gateway
        app.state.registry = SessionRegistry(app_gateway, settings.care)

        try:
            yield
        finally:
            logger.info("Shutting down Synthesis application")
            app.state.registry.close_all()

    app = FastAPI(
        title="Synthesis API",
        description="Caregiver support: pictograms, ABC behavior diary and SOS guidance",
        version=__version__,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ErrorHandlerMiddleware)

    app.add_exception_handler(GatewayConfigurationError, gateway_configuration_error_handler)
    app.add_exception_handler(SubmissionInProgressError, submission_in_progress_handler)

    app.include_router(
        api_router,
        prefix=f"/api/{settings.api_version}",
    )
    app.include_router(metrics_router)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": "Synthesis API",
            "version": __version__,
            "status": "up",
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "synthesis.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )
