"""OpenAI chat-completions client wrapper."""

from __future__ import annotations

import logging

from server.ai.errors import ProviderCallError, ProviderResponseError
from server.ai.settings import OPENAI_MODEL, PROVIDER_OPENAI

from .base import CompletionOptions

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Single-shot OpenAI client; failures surface as ``ProviderError``."""

    name = PROVIDER_OPENAI

    def __init__(self, api_key: str, model: str = OPENAI_MODEL, timeout: float = 30.0):
        from openai import OpenAI

        self.client = OpenAI(api_key=api_key, timeout=timeout)
        self.model = model

    def complete(self, prompt: str, options: CompletionOptions) -> str:
        messages = []
        if options.system_prompt:
            messages.append({"role": "system", "content": options.system_prompt})
        messages.append({"role": "user", "content": prompt})
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=options.temperature,
                max_tokens=options.max_tokens,
            )
        except Exception as exc:
            logger.warning("OpenAI error: %s", exc)
            raise ProviderCallError(self.name, str(exc)) from exc

        text = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not text:
            raise ProviderResponseError(self.name, "empty completion")
        return text
