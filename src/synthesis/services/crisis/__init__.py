"""Crisis services package."""

from synthesis.services.crisis.crisis_controller import CrisisController

__all__ = ["CrisisController"]
