"""AI package exports."""

from .clients import CompletionOptions, GeminiClient, OpenAIClient, TextGenerationProvider
from .errors import ProviderCallError, ProviderError, ProviderResponseError
from .optimizer import (
    FixtureOptimizationService,
    LocalOptimizationStrategy,
    ProviderOptimizationStrategy,
    optimize_fixture,
    parse_provider_reply,
)
from .prompt import build_optimization_prompt

__all__ = [
    "CompletionOptions",
    "FixtureOptimizationService",
    "GeminiClient",
    "LocalOptimizationStrategy",
    "OpenAIClient",
    "ProviderCallError",
    "ProviderError",
    "ProviderOptimizationStrategy",
    "ProviderResponseError",
    "TextGenerationProvider",
    "build_optimization_prompt",
    "optimize_fixture",
    "parse_provider_reply",
]
