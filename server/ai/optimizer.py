"""Fixture seeding optimization: provider-backed ordering with a local fallback."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from server.models import OptimizationRequest, OptimizationResult, Participant
from server.seeding import balance_skill_levels, is_permutation, separate_teams

from .clients import GeminiClient, OpenAIClient
from .clients.base import CompletionOptions, TextGenerationProvider
from .errors import ProviderResponseError
from .prompt import SYSTEM_PROMPT_FIXTURE, build_optimization_prompt
from .settings import (
    API_KEY_ENV,
    CONFIDENCE_SCORES,
    FIXTURE_AI_PROVIDER,
    PROVIDER_GEMINI,
    PROVIDER_LOCAL,
    PROVIDER_OPENAI,
    PROVIDERS,
)

logger = logging.getLogger(__name__)

LOCAL_REASONING = "Optimized using local algorithm with team separation and skill balancing"
LOCAL_SUGGESTIONS = [
    "Monitor early rounds for competitive balance",
    "Consider manual adjustments if any issues arise",
]
DEFAULT_PROVIDER_REASONING = "AI optimization completed"
PARSE_FAILED_REASONING = "AI response parsing failed, using original order"
PARSE_FAILED_SUGGESTIONS = ["Review participant order manually"]

_DECODER = json.JSONDecoder()

_CLIENT_CLASSES = {
    PROVIDER_OPENAI: OpenAIClient,
    PROVIDER_GEMINI: GeminiClient,
}


def _reorder(participants: list[Participant], order: list[str]) -> list[Participant]:
    by_id = {p.id: p for p in participants}
    return [by_id[pid] for pid in order]


class LocalOptimizationStrategy:
    """Deterministic seeding from the arrangement passes in ``server.seeding``.

    Passes run in a fixed order, each one fed the previous pass's output:
    team separation (knockout only), then skill balancing. Skill balancing
    re-sorts the whole field, so when both goals are set the team-separated
    order only survives as the tie-break between equal win rates.
    """

    name = PROVIDER_LOCAL

    def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        participants = list(request.participants)
        goals = request.optimizationGoals
        order = [p.id for p in participants]

        if len(participants) > 1:
            if goals.avoidSameTeamFirstRound and request.format == "knockout":
                order = separate_teams(participants)
                participants = _reorder(participants, order)
            if goals.balanceSkillLevels:
                order = balance_skill_levels(participants)

        return OptimizationResult(
            optimizedOrder=order,
            reasoning=LOCAL_REASONING,
            confidenceScore=CONFIDENCE_SCORES[PROVIDER_LOCAL],
            suggestions=list(LOCAL_SUGGESTIONS),
            strategy=self.name,
        )


def _first_json_object(text: str) -> dict[str, Any] | None:
    """Decode the first ``{...}`` in ``text`` that is a complete JSON object."""
    idx = text.find("{")
    while idx != -1:
        try:
            parsed, _ = _DECODER.raw_decode(text, idx)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, dict):
            return parsed
        idx = text.find("{", idx + 1)
    return None


def parse_provider_reply(text: str, participants: list[Participant]) -> dict[str, Any]:
    """Pull ``order``/``reasoning``/``suggestions`` out of a free-text reply.

    Prose around the object, braces included, is ignored. A reply without a
    readable JSON object degrades to the original order. A readable order
    that is not a permutation of the participants raises
    ``ProviderResponseError``.
    """
    original = [p.id for p in participants]
    parsed = _first_json_object(text or "")
    if parsed is None:
        logger.warning("Failed to parse AI response as JSON, using fallback")
        return {
            "order": original,
            "reasoning": PARSE_FAILED_REASONING,
            "suggestions": list(PARSE_FAILED_SUGGESTIONS),
            "parsed": False,
        }

    raw_order = parsed.get("order")
    if raw_order is None:
        order = original
    elif isinstance(raw_order, list):
        order = [str(pid) for pid in raw_order]
    else:
        raise ProviderResponseError("reply", f"'order' is {type(raw_order).__name__}, expected list")
    if not is_permutation(order, participants):
        raise ProviderResponseError("reply", "'order' is not a permutation of the participant ids")

    reasoning = parsed.get("reasoning") or DEFAULT_PROVIDER_REASONING
    suggestions = parsed.get("suggestions") or []
    if isinstance(suggestions, str):
        suggestions = [suggestions]
    elif not isinstance(suggestions, list):
        suggestions = []

    return {
        "order": order,
        "reasoning": str(reasoning),
        "suggestions": [str(s) for s in suggestions],
        "parsed": True,
    }


class ProviderOptimizationStrategy:
    """Ask an external text-generation provider for the seeding order."""

    def __init__(self, client: TextGenerationProvider):
        self.client = client
        self.name = client.name

    def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        prompt = build_optimization_prompt(request)
        text = self.client.complete(prompt, CompletionOptions(system_prompt=SYSTEM_PROMPT_FIXTURE))
        reply = parse_provider_reply(text, request.participants)
        if not reply["parsed"]:
            logger.info("%s reply had no usable JSON, keeping original order", self.name)

        return OptimizationResult(
            optimizedOrder=reply["order"],
            reasoning=reply["reasoning"],
            confidenceScore=CONFIDENCE_SCORES.get(self.name, CONFIDENCE_SCORES[PROVIDER_LOCAL]),
            suggestions=reply["suggestions"],
            strategy=self.name,
        )


def normalize_provider(provider: str | None) -> str:
    value = (provider or FIXTURE_AI_PROVIDER or PROVIDER_LOCAL).strip().lower()
    if value not in PROVIDERS:
        logger.warning("Unknown fixture AI provider %r, using local", value)
        return PROVIDER_LOCAL
    return value


def build_client(provider: str) -> TextGenerationProvider | None:
    """Create the vendor client for ``provider``, or None when it is not configured."""
    client_cls = _CLIENT_CLASSES.get(provider)
    if client_cls is None:
        return None
    key = os.getenv(API_KEY_ENV[provider], "").strip()
    if not key:
        logger.info("%s not configured, using local optimization", API_KEY_ENV[provider])
        return None
    try:
        return client_cls(key)
    except Exception as exc:
        logger.warning("Could not initialize %s client: %s", provider, exc)
        return None


class FixtureOptimizationService:
    """Public entry point: pick a strategy, run it, always return a result."""

    def __init__(self, provider: str | None = None, client: TextGenerationProvider | None = None):
        if client is not None:
            self.provider = normalize_provider(provider or client.name)
            self.client: TextGenerationProvider | None = client
        else:
            self.provider = normalize_provider(provider)
            self.client = build_client(self.provider)
        self.local = LocalOptimizationStrategy()

    def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        logger.info(
            "Optimizing fixture with %s provider (%d participants)",
            self.provider,
            len(request.participants),
        )
        if self.client is None or self.provider == PROVIDER_LOCAL or not request.participants:
            return self.local.optimize(request)

        try:
            return ProviderOptimizationStrategy(self.client).optimize(request)
        except Exception as exc:
            logger.warning("%s optimization failed, falling back to local algorithm: %s", self.provider, exc)
            result = self.local.optimize(request)
            return result.model_copy(update={"fallbackUsed": True})


def optimize_fixture(request: OptimizationRequest, provider: str | None = None) -> OptimizationResult:
    return FixtureOptimizationService(provider).optimize(request)
