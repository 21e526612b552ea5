"""
Prompt Builder

Constructs the two gateway prompts: ABC behavior analysis and SOS
crisis advice. Each pairs a fixed persona instruction (sent as the
system instruction) with a user message built from a fixed template.
"""

from dataclasses import dataclass
from enum import StrEnum

from synthesis.config.logging_config import get_logger
from synthesis.domain.models.behavior_log import BehaviorLogEntry

logger = get_logger(__name__)


class PromptKind(StrEnum):
    """Gateway call types."""

    BEHAVIOR_ANALYSIS = "behavior_analysis"
    CRISIS_ADVICE = "crisis_advice"


@dataclass
class BuiltPrompt:
    """
    Complete prompt ready for the model.

    Attributes:
        kind: Which call the prompt belongs to
        system_prompt: Persona instruction
        user_message: Filled user template
    """

    kind: PromptKind
    system_prompt: str
    user_message: str


class PromptBuilder:
    """
    Builds gateway prompts in the Synthesis Intelligence persona.

    The persona texts are fixed; only the user message varies with
    the entry, the child profile or the crisis description.
    """

    ANALYSIS_PERSONA: str = (
        "You are Synthesis Intelligence (SI), an autonomous expert and empathetic guide "
        "created by Studio Synthesis. You help parents of children on the autism spectrum "
        "look at their children's behavior analytically. Use the ABC method "
        "(Antecedent-Behavior-Consequence)."
    )

    CRISIS_PERSONA: str = (
        "You are Synthesis Intelligence in SOS mode. Maximum brevity, calm tone, clear steps. "
        "No long explanations. Safety and de-escalation come first."
    )

    ANALYSIS_TEMPLATE: str = """Analyze the following behavior incident using the ABC method for a child with this profile: {profile}.

Incident:
A (Antecedent): {antecedent}
B (Behavior): {behavior}
C (Consequence): {consequence}

Provide a brief analysis, possible triggers and recommendations for next time. Respond in {language} as Synthesis Intelligence."""

    CRISIS_TEMPLATE: str = """The user describes a crisis situation: {situation}.
Provide immediate, brief and calm steps for handling the situation (SOS mode).
1. Safety, 2. Stimulus reduction, 3. Breathing.
Respond in {language}."""

    def __init__(self, response_language: str = "Czech") -> None:
        """
        Initialize prompt builder.

        Args:
            response_language: Language the model should answer in
        """
        self.response_language = response_language

    def build_analysis(self, entry: BehaviorLogEntry, subject_profile: str) -> BuiltPrompt:
        """
        Build the ABC analysis prompt.

        Args:
            entry: Incident to analyze
            subject_profile: Short description of the child

        Returns:
            BuiltPrompt with the analysis persona
        """
        user_message = self.ANALYSIS_TEMPLATE.format(
            profile=subject_profile,
            antecedent=entry.antecedent,
            behavior=entry.behavior,
            consequence=entry.consequence,
            language=self.response_language,
        )
        logger.debug("Prompt built", kind=PromptKind.BEHAVIOR_ANALYSIS.value)
        return BuiltPrompt(
            kind=PromptKind.BEHAVIOR_ANALYSIS,
            system_prompt=self.ANALYSIS_PERSONA,
            user_message=user_message,
        )

    def build_crisis(self, situation_description: str) -> BuiltPrompt:
        """Build the SOS advice prompt."""
        user_message = self.CRISIS_TEMPLATE.format(
            situation=situation_description,
            language=self.response_language,
        )
        logger.debug("Prompt built", kind=PromptKind.CRISIS_ADVICE.value)
        return BuiltPrompt(
            kind=PromptKind.CRISIS_ADVICE,
            system_prompt=self.CRISIS_PERSONA,
            user_message=user_message,
        )
