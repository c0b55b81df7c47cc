"""Seed arrangement passes used by the local fixture optimizer.

Every function takes the participant list as given and returns a new list of
participant ids. Inputs are never mutated.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from server.models import Participant

DEFAULT_WIN_RATE = 50.0


def win_rate(participant: Participant) -> float:
    """Effective rating of a participant; missing stats count as average."""
    stats = participant.stats
    if stats is None or stats.winRate is None:
        return DEFAULT_WIN_RATE
    return float(stats.winRate)


def separate_teams(participants: list[Participant]) -> list[str]:
    """Put one representative of every team at the front of the order.

    Teams are visited in the order they are first encountered. Participants
    without a team are never grouped; they keep their relative position among
    everyone not picked as a representative.
    """
    representatives: dict[str, str] = {}
    for p in participants:
        if p.teamId and p.teamId not in representatives:
            representatives[p.teamId] = p.id

    arranged = list(representatives.values())
    placed = set(arranged)
    arranged.extend(p.id for p in participants if p.id not in placed)
    return arranged


def balance_skill_levels(participants: list[Participant]) -> list[str]:
    """Snake-draft the field so strong and weak seeds alternate.

    Sorted strongest first, then taken strongest, weakest, next strongest,
    next weakest, ... With an odd count the middle participant is placed
    last, exactly once.
    """
    ranked = sorted(participants, key=win_rate, reverse=True)
    balanced: list[str] = []
    lo, hi = 0, len(ranked) - 1
    while lo <= hi:
        balanced.append(ranked[lo].id)
        if lo != hi:
            balanced.append(ranked[hi].id)
        lo += 1
        hi -= 1
    return balanced


def is_permutation(order: Iterable[str], participants: list[Participant]) -> bool:
    """True when ``order`` holds every participant id exactly once."""
    return Counter(order) == Counter(p.id for p in participants)
