"""Domain models package."""

from synthesis.domain.models.behavior_log import ABC_FIELDS, BehaviorLogEntry, Draft
from synthesis.domain.models.crisis import CrisisPhase, CrisisSession
from synthesis.domain.models.pictogram import PICTOGRAM_CATALOG, Pictogram

__all__ = [
    "ABC_FIELDS",
    "BehaviorLogEntry",
    "Draft",
    "CrisisPhase",
    "CrisisSession",
    "PICTOGRAM_CATALOG",
    "Pictogram",
]
