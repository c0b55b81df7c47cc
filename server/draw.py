"""Turn a seeding order into the match list of a fixture."""

from __future__ import annotations

import logging
import random

from server.models import Match, MatchStatus

logger = logging.getLogger(__name__)


def knockout_round_count(participant_count: int) -> int:
    """Rounds needed to reduce ``participant_count`` entrants to one winner."""
    if participant_count < 2:
        return 0
    return (participant_count - 1).bit_length()


def _match_id(fixture_id: str, round_no: int, number: int) -> str:
    return f"{fixture_id}-r{round_no}-m{number}"


def first_round_pairs(order: list[str]) -> list[tuple[str, str | None]]:
    """Round-1 (home, away) pairs with byes spread over the later matches.

    A bracket of ``2**R`` slots holding ``n`` entrants has ``2**R - n`` byes.
    The leading matches are played in full and each trailing match hands one
    entrant a walkover, so no round-1 match is left empty.
    """
    total_rounds = knockout_round_count(len(order))
    if total_rounds == 0:
        return []
    first_round = 2 ** (total_rounds - 1)
    full = first_round - (2 ** total_rounds - len(order))

    pairs: list[tuple[str, str | None]] = [(order[2 * i], order[2 * i + 1]) for i in range(full)]
    pairs.extend((pid, None) for pid in order[2 * full:])
    return pairs


def build_knockout_matches(
    order: list[str],
    fixture_id: str = "fixture",
    shuffle: bool = False,
    rng: random.Random | None = None,
) -> list[Match]:
    """Build a power-of-two knockout bracket seeded in ``order``.

    Fully played round-1 matches pair ``order[0]`` with ``order[1]``,
    ``order[2]`` with ``order[3]`` and so on. The remaining entrants each get
    a walkover and are moved straight into the round-2 slot they feed.
    With ``shuffle`` the seeding order is randomized first, using ``rng``
    when one is given. Match numbers run sequentially through the bracket.
    """
    if shuffle:
        order = list(order)
        (rng or random.Random()).shuffle(order)

    pairs = first_round_pairs(order)
    if not pairs:
        return []
    total_rounds = knockout_round_count(len(order))

    rounds: list[list[Match]] = []
    number = 1
    for r in range(1, total_rounds + 1):
        row: list[Match] = []
        for i in range(2 ** (total_rounds - r)):
            match = Match(id=_match_id(fixture_id, r, number), round=r, matchNumber=number)
            number += 1
            if r == 1:
                match.homeParticipant, match.awayParticipant = pairs[i]
                if match.awayParticipant is None:
                    match.winner = match.homeParticipant
                    match.status = MatchStatus.WALKOVER
            row.append(match)
        rounds.append(row)

    for r, row in enumerate(rounds[:-1]):
        next_row = rounds[r + 1]
        for i, match in enumerate(row):
            parent = next_row[i // 2]
            match.nextMatchId = parent.id
            parent.previousMatchIds.append(match.id)

    if len(rounds) > 1:
        for i, match in enumerate(rounds[0]):
            if match.status != MatchStatus.WALKOVER:
                continue
            parent = rounds[1][i // 2]
            if i % 2 == 0:
                parent.homeParticipant = match.winner
            else:
                parent.awayParticipant = match.winner

    matches = [m for row in rounds for m in row]
    logger.info("Built knockout draw: %d participants, %d rounds, %d matches", len(order), total_rounds, len(matches))
    return matches


def build_round_robin_matches(order: list[str], rounds: int = 1, fixture_id: str = "fixture") -> list[Match]:
    """Every pairing once per round, home side taken from the earlier seed."""
    matches: list[Match] = []
    number = 1
    for r in range(1, rounds + 1):
        for i, home in enumerate(order):
            for away in order[i + 1:]:
                matches.append(
                    Match(
                        id=_match_id(fixture_id, r, number),
                        round=r,
                        matchNumber=number,
                        homeParticipant=home,
                        awayParticipant=away,
                    )
                )
                number += 1
    logger.info("Built round-robin draw: %d participants, %d matches", len(order), len(matches))
    return matches
