"""Prompt construction package."""

from synthesis.services.prompt.prompt_builder import BuiltPrompt, PromptBuilder, PromptKind

__all__ = ["BuiltPrompt", "PromptBuilder", "PromptKind"]
