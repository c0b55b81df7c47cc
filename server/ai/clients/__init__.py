"""AI client adapters."""

from .base import CompletionOptions, TextGenerationProvider
from .gemini_client import GeminiClient
from .openai_client import OpenAIClient

__all__ = ["CompletionOptions", "GeminiClient", "OpenAIClient", "TextGenerationProvider"]
