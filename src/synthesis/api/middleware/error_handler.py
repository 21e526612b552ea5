"""
Error Handler Middleware

Tags each request with a correlation ID (and the app session ID on
session routes) and turns anything the exception handlers in main.py
did not catch into a 500 that reveals nothing about the failure.
"""

import re
from typing import Optional
from uuid import uuid4

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from synthesis.config.logging_config import bind_request_context, clear_context, get_logger
from synthesis.infrastructure.monitoring.sentry_integration import report_exception

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

_SESSION_PATH = re.compile(r"/sessions/([0-9a-fA-F-]{36})(?:/|$)")


def session_id_from_path(path: str) -> Optional[str]:
    match = _SESSION_PATH.search(path)
    return match.group(1) if match else None


class ErrorHandlerMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid4())
        session_id = session_id_from_path(request.url.path)
        bind_request_context(correlation_id, session_id)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
            )
            report_exception(e, session_id=session_id, path=request.url.path)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "internal_error",
                    "message": "Something went wrong. Please try again.",
                    "correlation_id": correlation_id,
                },
            )
        finally:
            clear_context()

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
