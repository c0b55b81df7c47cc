"""Exceptions raised by the AI provider layer."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for text-generation provider failures."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ProviderCallError(ProviderError):
    """The outbound request failed (network, auth, rate limit, non-2xx)."""


class ProviderResponseError(ProviderError):
    """The provider answered, but the answer cannot be used."""
