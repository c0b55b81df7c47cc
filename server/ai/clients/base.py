"""Text-generation capability shared by the vendor adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from server.ai.settings import MAX_OUTPUT_TOKENS, TEMPERATURE


@dataclass(frozen=True)
class CompletionOptions:
    temperature: float = TEMPERATURE
    max_tokens: int = MAX_OUTPUT_TOKENS
    system_prompt: str = ""


class TextGenerationProvider(Protocol):
    """Anything that turns a prompt into free text.

    Implementations raise ``ProviderError`` subclasses on failure instead of
    returning an empty string.
    """

    name: str

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        ...
