"""League table for round-robin fixtures."""

from __future__ import annotations

import logging
from typing import Optional

from server.models import Match, MatchStatus, PointsTable, Standing

logger = logging.getLogger(__name__)


def compute_standings(
    matches: list[Match],
    participants: list[str],
    points: Optional[PointsTable] = None,
) -> list[Standing]:
    """Aggregate completed matches into a table sorted by points, goal difference, goals for.

    Only completed matches with both sides filled count. A completed match
    without a winner is a draw. Missing scores count as 0. Matches naming a
    participant outside ``participants`` are skipped.
    """
    points = points or PointsTable()
    table = {pid: Standing(participantId=pid) for pid in participants}

    for m in matches:
        if m.status != MatchStatus.COMPLETED or not m.homeParticipant or not m.awayParticipant:
            continue
        home = table.get(m.homeParticipant)
        away = table.get(m.awayParticipant)
        if home is None or away is None:
            logger.debug("Skipping match %s with unknown participant", m.id)
            continue

        home_goals = m.homeScore or 0
        away_goals = m.awayScore or 0
        home.played += 1
        away.played += 1
        home.goalsFor += home_goals
        home.goalsAgainst += away_goals
        away.goalsFor += away_goals
        away.goalsAgainst += home_goals

        if m.winner is None:
            home.drawn += 1
            away.drawn += 1
            home.points += points.pointsForDraw
            away.points += points.pointsForDraw
        else:
            winner, loser = (home, away) if m.winner == m.homeParticipant else (away, home)
            winner.won += 1
            winner.points += points.pointsForWin
            loser.lost += 1
            loser.points += points.pointsForLoss

    for row in table.values():
        row.goalDifference = row.goalsFor - row.goalsAgainst

    return sorted(table.values(), key=lambda s: (s.points, s.goalDifference, s.goalsFor), reverse=True)
