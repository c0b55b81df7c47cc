"""Fixture Engine API server."""

from __future__ import annotations

import logging
import os
import random
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from server.ai import optimize_fixture
from server.ai.settings import API_KEY_ENV, FIXTURE_AI_PROVIDER
from server.bracket_layout import layout_bracket
from server.draw import build_knockout_matches, build_round_robin_matches
from server.models import (
    BracketLayout,
    FixtureFormat,
    LayoutOptions,
    Match,
    OptimizationRequest,
    OptimizationResult,
    PointsTable,
    Standing,
)
from server.standings import compute_standings

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Fixture Engine API", version="1.0.0")

ALLOWED_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
]
_extra_origin = os.getenv("CORS_ORIGIN", "")
if _extra_origin:
    ALLOWED_ORIGINS.append(_extra_origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"name": "Fixture Engine API", "docs": "/docs", "health": "/api/health"}


@app.post("/api/fixtures/optimize", response_model=OptimizationResult)
def api_optimize(req: OptimizationRequest, provider: Optional[str] = None):
    return optimize_fixture(req, provider)


class DrawRequest(BaseModel):
    order: list[str]
    format: FixtureFormat = "knockout"
    rounds: int = Field(default=1, ge=1)
    fixtureId: str = "fixture"
    shuffle: bool = False
    seed: Optional[int] = None


@app.post("/api/fixtures/draw")
def api_draw(req: DrawRequest):
    if req.format == "roundrobin":
        matches = build_round_robin_matches(req.order, rounds=req.rounds, fixture_id=req.fixtureId)
    else:
        rng = random.Random(req.seed) if req.shuffle else None
        matches = build_knockout_matches(req.order, fixture_id=req.fixtureId, shuffle=req.shuffle, rng=rng)
    return {"format": req.format, "matches": matches}


class StandingsRequest(PointsTable):
    participants: list[str] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)


@app.post("/api/fixtures/standings", response_model=list[Standing])
def api_standings(req: StandingsRequest):
    points = PointsTable(
        pointsForWin=req.pointsForWin,
        pointsForDraw=req.pointsForDraw,
        pointsForLoss=req.pointsForLoss,
    )
    return compute_standings(req.matches, req.participants, points)


class LayoutRequest(LayoutOptions):
    matches: list[Match] = Field(default_factory=list)


@app.post("/api/bracket/layout", response_model=BracketLayout)
def api_layout(req: LayoutRequest):
    options = LayoutOptions(participantType=req.participantType, doubles=req.doubles)
    return layout_bracket(req.matches, options)


@app.get("/api/health")
def api_health():
    return {
        "status": "ok",
        "provider": FIXTURE_AI_PROVIDER,
        "providersConfigured": {
            name: bool(os.getenv(env_key, "").strip()) for name, env_key in API_KEY_ENV.items()
        },
    }
