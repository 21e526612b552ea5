"""
Logging

structlog setup shared by the API and the screen controllers. Every
line carries the request correlation ID and, on session routes, the
app session ID.

PRIVACY: Diary fields and crisis descriptions are written by a parent
about their child. Their values never reach a log line; log lengths
and IDs instead.
"""

import logging
import sys
from typing import Any, Optional

import structlog

from synthesis import __version__
from synthesis.config.settings import Settings
from synthesis.domain.models.behavior_log import ABC_FIELDS

# Event keys whose values are caregiver text, model answers or the key
PRIVATE_FIELDS: frozenset[str] = frozenset(ABC_FIELDS) | {
    "situation",
    "advice",
    "analysis",
    "api_key",
}

REDACTED = "[REDACTED]"

# Chatty below WARNING and never about the caregiver's actions
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "google")


def redact_private_fields(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace values of private keys, including inside bound dicts."""
    for key, value in event_dict.items():
        if key in PRIVATE_FIELDS:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                k: REDACTED if k in PRIVATE_FIELDS else v for k, v in value.items()
            }
    return event_dict


def _add_app_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("app", "synthesis")
    event_dict.setdefault("app_version", __version__)
    return event_dict


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog and the stdlib root logger.

    Console output in development, one JSON object per line elsewhere.
    Call once at startup.
    """
    development = settings.env == "development"

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_private_fields,
        _add_app_context,
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(correlation_id: str, session_id: Optional[str] = None) -> None:
    """Attach request identifiers to every log line until clear_context()."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
    if session_id:
        structlog.contextvars.bind_contextvars(session_id=session_id)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
