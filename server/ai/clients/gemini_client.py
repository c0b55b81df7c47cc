"""Gemini API client wrapper."""

from __future__ import annotations

import logging

from server.ai.errors import ProviderCallError, ProviderResponseError
from server.ai.settings import GEMINI_MODEL, PROVIDER_GEMINI

from .base import CompletionOptions

logger = logging.getLogger(__name__)


class GeminiClient:
    """Single-shot Gemini client; failures surface as ``ProviderError``."""

    name = PROVIDER_GEMINI

    def __init__(self, api_key: str, model: str = GEMINI_MODEL):
        from google import genai

        self.client = genai.Client(api_key=api_key)
        self.model = model

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        config = {
            "temperature": options.temperature,
            "max_output_tokens": options.max_tokens,
        }
        if options.system_prompt:
            config["system_instruction"] = options.system_prompt
        try:
            resp = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            logger.warning("Gemini error: %s", exc)
            raise ProviderCallError(self.name, str(exc)) from exc

        text = (resp.text or "").strip()
        if not text:
            raise ProviderResponseError(self.name, "empty completion")
        return text
