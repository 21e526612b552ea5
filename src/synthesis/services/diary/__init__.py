"""Diary services package."""

from synthesis.services.diary.diary_controller import DiaryController
from synthesis.services.diary.log_store import BehaviorLogStore

__all__ = ["BehaviorLogStore", "DiaryController"]
