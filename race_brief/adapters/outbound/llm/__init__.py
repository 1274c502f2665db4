"""LLM adapters."""

from .gemini_adapter import GeminiNarrativeAdapter

__all__ = ["GeminiNarrativeAdapter"]
