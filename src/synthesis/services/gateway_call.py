"""
Gateway Call Result

Screen controllers call the AI gateway through run_gateway_call(),
which turns the outcome into an explicit GatewaySuccess or
GatewayFailure. Callers branch on both; transport errors never leak
into screen state as exceptions.

A missing credential is not a call outcome: GatewayConfigurationError
propagates so the user sees the configuration problem.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Union

from synthesis.config.logging_config import get_logger
from synthesis.domain.errors import GatewayConfigurationError
from synthesis.infrastructure.monitoring.sentry_integration import report_exception

logger = get_logger(__name__)


@dataclass(frozen=True)
class GatewaySuccess:
    """The model answered; text is verbatim."""

    text: str


@dataclass(frozen=True)
class GatewayFailure:
    """The call failed in transport or at the API."""

    reason: str
    error: Exception = field(compare=False, repr=False)


GatewayResult = Union[GatewaySuccess, GatewayFailure]


async def run_gateway_call(call: Awaitable[str], *, operation: str) -> GatewayResult:
    """
    Await a gateway call and wrap its outcome.

    Args:
        call: Pending gateway coroutine
        operation: Name used in logs

    Returns:
        GatewaySuccess or GatewayFailure

    Raises:
        GatewayConfigurationError: Credential missing
    """
    try:
        text = await call
    except GatewayConfigurationError:
        raise
    except Exception as e:
        logger.error(
            "Gateway call failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        report_exception(e, operation=operation)
        return GatewayFailure(reason=str(e) or type(e).__name__, error=e)

    return GatewaySuccess(text=text)
