"""
Crisis Screen Controller

SOS screen: breathing guidance until the caregiver asks for help,
then one gateway call for a calm, step-ordered crisis protocol.

A failed call returns the screen to breathing guidance and leaves a
visible notice instead of failing silently.
"""

from typing import Optional

from synthesis.config.logging_config import get_logger
from synthesis.domain.errors import GatewayConfigurationError
from synthesis.domain.models.crisis import CrisisPhase, CrisisSession
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.metrics.prometheus_metrics import track_crisis_request
from synthesis.services.gateway_call import (
    GatewayFailure,
    GatewayResult,
    GatewaySuccess,
    run_gateway_call,
)

logger = get_logger(__name__)

CRISIS_FAILED_NOTICE = "The crisis protocol could not be loaded. Keep following the steps below and try again."

BREATHING_PROMPT = "Breathe slowly. Follow the circle and match your breath to its movement."

# Shown with the breathing guidance
GROUNDING_STEPS: tuple[str, ...] = (
    "Make sure the child and the people around are safe.",
    "Reduce sensory stimuli (light, noise).",
)


class CrisisController:
    """SOS screen state and operations."""

    def __init__(self, gateway: AIGateway, default_situation: str) -> None:
        self._gateway = gateway
        self._default_situation = default_situation
        self.session = CrisisSession()

    @property
    def phase(self) -> CrisisPhase:
        return self.session.phase

    @property
    def advice(self) -> Optional[str]:
        return self.session.advice

    async def trigger_help(self, situation: Optional[str] = None) -> GatewayResult:
        """
        Request crisis advice.

        Args:
            situation: Live description; the configured default when empty

        Raises:
            InvalidCrisisTransitionError: Not in the breathing phase
            GatewayConfigurationError: No model credential configured
        """
        self.session.request_help()
        description = situation.strip() if situation and situation.strip() else self._default_situation

        try:
            result = await run_gateway_call(
                self._gateway.get_crisis_advice(description),
                operation="get_crisis_advice",
            )
        except GatewayConfigurationError:
            self.session.fail()
            raise

        if isinstance(result, GatewaySuccess):
            self.session.receive_advice(result.text)
            track_crisis_request("advice")
            logger.info("Crisis advice shown", advice_length=len(result.text))
        elif isinstance(result, GatewayFailure):
            self.session.fail(CRISIS_FAILED_NOTICE)
            track_crisis_request("failed")
            logger.warning("Crisis advice unavailable", reason=result.reason)

        return result

    def dismiss(self) -> None:
        """
        Close the advice and return to breathing guidance.

        Raises:
            InvalidCrisisTransitionError: No advice is shown
        """
        self.session.dismiss()

    def render(self) -> dict:
        """Screen state for the client."""
        state = self.session.to_dict()
        breathing = self.phase == CrisisPhase.BREATHING
        state["breathing_prompt"] = BREATHING_PROMPT if breathing else None
        state["grounding_steps"] = list(GROUNDING_STEPS) if breathing else []
        return state
