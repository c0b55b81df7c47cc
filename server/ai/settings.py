"""Shared AI settings and constants."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env")

PROVIDER_OPENAI = "openai"
PROVIDER_GEMINI = "gemini"
PROVIDER_LOCAL = "local"
PROVIDERS = (PROVIDER_OPENAI, PROVIDER_GEMINI, PROVIDER_LOCAL)

FIXTURE_AI_PROVIDER = os.getenv("FIXTURE_AI_PROVIDER", PROVIDER_LOCAL).strip().lower()

OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

# Low temperature: the ordering should be reproducible, not creative.
TEMPERATURE = float(os.getenv("FIXTURE_AI_TEMPERATURE", "0.3"))
MAX_OUTPUT_TOKENS = int(os.getenv("FIXTURE_AI_MAX_TOKENS", "1024"))

API_KEY_ENV = {
    PROVIDER_OPENAI: "OPENAI_API_KEY",
    PROVIDER_GEMINI: "GEMINI_API_KEY",
}

# A-priori trust ranking per strategy, not a measured quality signal.
CONFIDENCE_SCORES = {
    PROVIDER_OPENAI: 95,
    PROVIDER_GEMINI: 92,
    PROVIDER_LOCAL: 75,
}
