"""Request/response models shared by the optimizer, draw builder and bracket layout."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

FixtureFormat = Literal["knockout", "roundrobin"]

# Deepest bracket accepted: 2**30 entrants.
MAX_ROUNDS = 30


class ParticipantStats(BaseModel):
    wins: Optional[int] = None
    losses: Optional[int] = None
    winRate: Optional[float] = Field(default=None, ge=0, le=100)


class Participant(BaseModel):
    id: str
    name: str
    teamId: Optional[str] = None
    teamName: Optional[str] = None
    stats: Optional[ParticipantStats] = None


class OptimizationGoals(BaseModel):
    balanceSkillLevels: bool = False
    avoidSameTeamFirstRound: bool = False
    prioritizeCompetitiveMatches: bool = False
    fairScheduling: bool = False


class OptimizationConstraints(BaseModel):
    maxMatchesPerDay: Optional[int] = None
    minRestBetweenMatches: Optional[int] = None


class OptimizationRequest(BaseModel):
    participants: list[Participant] = Field(default_factory=list)
    format: FixtureFormat = "knockout"
    optimizationGoals: OptimizationGoals = Field(default_factory=OptimizationGoals)
    constraints: Optional[OptimizationConstraints] = None

    def participant_ids(self) -> list[str]:
        return [p.id for p in self.participants]


class OptimizationResult(BaseModel):
    optimizedOrder: list[str]
    reasoning: str
    confidenceScore: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)
    strategy: str = "local"
    fallbackUsed: bool = False


class MatchStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"
    WALKOVER = "walkover"


class Match(BaseModel):
    id: str
    round: int = Field(ge=0, le=MAX_ROUNDS)
    matchNumber: int = Field(ge=0)
    homeParticipant: Optional[str] = None
    awayParticipant: Optional[str] = None
    homeScore: Optional[int] = None
    awayScore: Optional[int] = None
    winner: Optional[str] = None
    status: MatchStatus = MatchStatus.SCHEDULED
    nextMatchId: Optional[str] = None
    previousMatchIds: list[str] = Field(default_factory=list)

    def is_bye(self) -> bool:
        """Exactly one side of the match has a participant."""
        return (self.homeParticipant is None) != (self.awayParticipant is None)


ConnectorKind = Literal["stub", "feeder", "join", "elbow"]
ConnectorState = Literal["resolved", "pending"]


class ConnectorSegment(BaseModel):
    kind: ConnectorKind
    x1: float
    y1: float
    x2: float
    y2: float
    state: ConnectorState = "pending"


class MatchLayout(BaseModel):
    matchId: str
    round: int
    matchIndex: int
    x: float
    topY: float
    centerY: float
    connectors: list[ConnectorSegment] = Field(default_factory=list)
    statusLabel: str = ""
    isBye: bool = False
    isChampion: bool = False


class RoundLayout(BaseModel):
    round: int
    label: str
    x: float


class LayoutOptions(BaseModel):
    participantType: Literal["player", "team"] = "player"
    doubles: bool = False


class BracketLayout(BaseModel):
    rounds: list[RoundLayout] = Field(default_factory=list)
    matches: list[MatchLayout] = Field(default_factory=list)
    totalHeight: float = 0.0
    matchHeight: float = 0.0
    matchWidth: float = 0.0
    roundGap: float = 0.0

    def by_id(self) -> dict[str, MatchLayout]:
        return {m.matchId: m for m in self.matches}


class PointsTable(BaseModel):
    pointsForWin: int = 3
    pointsForDraw: int = 1
    pointsForLoss: int = 0


class Standing(BaseModel):
    participantId: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goalsFor: int = 0
    goalsAgainst: int = 0
    goalDifference: int = 0
    points: int = 0
