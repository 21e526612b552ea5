"""
Unit Tests for the Crisis Screen Controller

Covers the breathing -> awaiting_advice -> advice_shown -> breathing cycle.
"""

import asyncio

import pytest

from synthesis.domain.errors import GatewayConfigurationError, InvalidCrisisTransitionError
from synthesis.domain.models.crisis import CrisisPhase, CrisisSession
from synthesis.infrastructure.llm.gateway import AIGateway
from synthesis.infrastructure.llm.provider import ContentBlockedError
from synthesis.services.crisis.crisis_controller import (
    CRISIS_FAILED_NOTICE,
    GROUNDING_STEPS,
    CrisisController,
)
from synthesis.services.gateway_call import GatewayFailure, GatewaySuccess


def _crisis_with(provider, care_settings) -> CrisisController:
    return CrisisController(AIGateway(provider), default_situation=care_settings.default_crisis_situation)


class TestCrisisSession:
    """State machine rules independent of the gateway."""

    def test_starts_breathing(self):
        session = CrisisSession()

        assert session.phase == CrisisPhase.BREATHING
        assert session.advice is None

    def test_dismiss_requires_advice(self):
        with pytest.raises(InvalidCrisisTransitionError):
            CrisisSession().dismiss()

    def test_advice_requires_request(self):
        with pytest.raises(InvalidCrisisTransitionError):
            CrisisSession().receive_advice("text")

    def test_request_clears_failure_notice(self):
        session = CrisisSession(failure_notice="old notice")

        session.request_help()

        assert session.failure_notice is None
        assert session.is_loading is True


class TestTriggerHelp:

    @pytest.mark.asyncio
    async def test_success_shows_exact_advice(self, make_provider, care_settings):
        crisis = _crisis_with(make_provider(["1. Safety. 2. Quiet. 3. Breathe."]), care_settings)

        result = await crisis.trigger_help()

        assert result == GatewaySuccess(text="1. Safety. 2. Quiet. 3. Breathe.")
        assert crisis.phase == CrisisPhase.ADVICE_SHOWN
        assert crisis.advice == "1. Safety. 2. Quiet. 3. Breathe."

    @pytest.mark.asyncio
    async def test_awaiting_advice_while_in_flight(self, crisis, provider):
        provider.release = asyncio.Event()

        pending = asyncio.create_task(crisis.trigger_help())
        await asyncio.sleep(0)

        assert crisis.phase == CrisisPhase.AWAITING_ADVICE
        assert crisis.render()["is_loading"] is True
        assert crisis.render()["grounding_steps"] == []
        with pytest.raises(InvalidCrisisTransitionError):
            await crisis.trigger_help()

        provider.release.set()
        await pending

        assert crisis.phase == CrisisPhase.ADVICE_SHOWN
        assert len(provider.calls) == 1

    @pytest.mark.asyncio
    async def test_default_situation_used(self, crisis, provider, care_settings):
        await crisis.trigger_help()

        assert care_settings.default_crisis_situation in provider.calls[0].user_message

    @pytest.mark.asyncio
    async def test_live_situation_used(self, crisis, provider):
        await crisis.trigger_help("  screaming at the bus stop  ")

        assert "screaming at the bus stop." in provider.calls[0].user_message

    @pytest.mark.asyncio
    async def test_blank_situation_falls_back_to_default(self, crisis, provider, care_settings):
        await crisis.trigger_help("   ")

        assert care_settings.default_crisis_situation in provider.calls[0].user_message

    @pytest.mark.asyncio
    async def test_failure_returns_to_breathing_with_notice(self, make_provider, care_settings):
        crisis = _crisis_with(make_provider([ConnectionError("down")]), care_settings)

        result = await crisis.trigger_help()

        assert isinstance(result, GatewayFailure)
        assert crisis.phase == CrisisPhase.BREATHING
        assert crisis.advice is None
        state = crisis.render()
        assert state["failure_notice"] == CRISIS_FAILED_NOTICE
        assert state["grounding_steps"] == list(GROUNDING_STEPS)
        assert state["is_loading"] is False

    @pytest.mark.asyncio
    async def test_blocked_prompt_shows_notice_not_empty_advice(self, make_provider, care_settings):
        crisis = _crisis_with(make_provider([ContentBlockedError(provider="gemini", reason="SAFETY")]), care_settings)

        result = await crisis.trigger_help("child hitting head on the floor")

        assert isinstance(result, GatewayFailure)
        assert crisis.phase == CrisisPhase.BREATHING
        assert crisis.render()["failure_notice"] == CRISIS_FAILED_NOTICE

    @pytest.mark.asyncio
    async def test_configuration_error_restores_breathing(self, make_provider, care_settings):
        crisis = _crisis_with(make_provider(configured=False), care_settings)

        with pytest.raises(GatewayConfigurationError):
            await crisis.trigger_help()

        assert crisis.phase == CrisisPhase.BREATHING


class TestDismiss:

    @pytest.mark.asyncio
    async def test_dismiss_returns_to_breathing(self, crisis):
        await crisis.trigger_help()

        crisis.dismiss()

        assert crisis.phase == CrisisPhase.BREATHING
        assert crisis.advice is None

    @pytest.mark.asyncio
    async def test_cycle_can_repeat(self, crisis, provider):
        for _ in range(2):
            await crisis.trigger_help()
            crisis.dismiss()

        assert len(provider.calls) == 2
        assert crisis.phase == CrisisPhase.BREATHING

    def test_dismiss_while_breathing_rejected(self, crisis):
        with pytest.raises(InvalidCrisisTransitionError):
            crisis.dismiss()
