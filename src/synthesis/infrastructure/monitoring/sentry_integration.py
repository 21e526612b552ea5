"""
Sentry Error Tracking

Optional: nothing is sent unless SYNTHESIS_SENTRY_DSN is set, and
report_exception() is then a no-op.

PRIVACY: Events are stripped of diary and crisis text, the model's
answers and the Gemini API key before they leave the process.
"""

import re
from typing import Any, Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from synthesis import __version__
from synthesis.config.logging_config import PRIVATE_FIELDS, get_logger
from synthesis.config.settings import Settings

logger = get_logger(__name__)

FILTERED = "[Filtered]"

# The composer PATCH body is {"field": ..., "value": <caregiver text>}
PRIVATE_BODY_FIELDS: frozenset[str] = PRIVATE_FIELDS | {"value"}

# Google API keys, bare or as the key= query parameter of SDK URLs
_API_KEY_PATTERN = re.compile(r"AIza[0-9A-Za-z_\-]{35}|(?<=key=)[^&\s\"']+")


def mask_api_keys(text: str) -> str:
    return _API_KEY_PATTERN.sub(FILTERED, text)


def scrub(data: Any) -> Any:
    """Drop private fields at any depth and mask API keys in strings."""
    if isinstance(data, dict):
        return {
            key: FILTERED if str(key).lower() in PRIVATE_BODY_FIELDS else scrub(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [scrub(item) for item in data]
    if isinstance(data, str):
        return mask_api_keys(data)
    return data


def before_send(event: dict, hint: dict) -> Optional[dict]:
    request = event.get("request")
    if request:
        if "data" in request:
            body = request["data"]
            request["data"] = scrub(body) if isinstance(body, (dict, list)) else FILTERED
        if isinstance(request.get("query_string"), str):
            request["query_string"] = mask_api_keys(request["query_string"])
        request.pop("cookies", None)

    for exception in event.get("exception", {}).get("values", []):
        if isinstance(exception.get("value"), str):
            exception["value"] = mask_api_keys(exception["value"])

    for crumb in event.get("breadcrumbs", {}).get("values", []):
        if isinstance(crumb.get("message"), str):
            crumb["message"] = mask_api_keys(crumb["message"])
        if isinstance(crumb.get("data"), dict):
            crumb["data"] = scrub(crumb["data"])

    for section in ("extra", "contexts"):
        if section in event:
            event[section] = scrub(event[section])

    return event


def init_sentry(settings: Settings) -> bool:
    """
    Initialize Sentry when a DSN is configured.

    Returns:
        True if Sentry was initialized
    """
    if not settings.sentry_dsn:
        logger.info("Sentry DSN not configured, error tracking disabled")
        return False

    release = f"synthesis@{__version__}"
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.env,
        release=release,
        traces_sample_rate=0.1,
        before_send=before_send,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            LoggingIntegration(level=None, event_level=None),
        ],
        send_default_pii=False,
    )
    logger.info("Sentry initialized", environment=settings.env, release=release)
    return True


def report_exception(
    exception: BaseException,
    *,
    session_id: Optional[str] = None,
    **context: Any,
) -> Optional[str]:
    """
    Send an exception with the app session and call context.

    Returns:
        Sentry event ID (None when Sentry is disabled)
    """
    with sentry_sdk.new_scope() as scope:
        if session_id:
            scope.set_tag("session_id", session_id)
        if context:
            scope.set_context("synthesis", scrub(context))
        return sentry_sdk.capture_exception(exception)
