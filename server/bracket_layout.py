"""Single-elimination bracket layout.

Matches carry no parent pointers that the layout trusts; the tree is implied
by ``(round, matchNumber)``: the match at index ``i`` of round ``r`` feeds
match ``i // 2`` of round ``r + 1``, as its top slot when ``i`` is even and
its bottom slot when odd.

Vertical space is reserved as if the bracket were a perfect power-of-two
tree. Positions are seeded at the final and pushed backwards round by round.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Optional

from server.models import (
    BracketLayout,
    ConnectorSegment,
    LayoutOptions,
    Match,
    MatchLayout,
    MatchStatus,
    RoundLayout,
)

logger = logging.getLogger(__name__)

MATCH_HEIGHT_PLAYER = 150
MATCH_HEIGHT_DOUBLES = 170
MATCH_HEIGHT_TEAM = 125
MATCH_WIDTH = 300
MATCH_WIDTH_DOUBLES = 350
ROUND_GAP = 120
VERTICAL_GAP = 30
# Smaller vertical offsets to the next match are drawn as a straight stub.
ELBOW_MIN_OFFSET = 5


def card_size(options: LayoutOptions) -> tuple[int, int]:
    """(width, height) of one match card."""
    if options.participantType == "team":
        height = MATCH_HEIGHT_TEAM
    else:
        height = MATCH_HEIGHT_DOUBLES if options.doubles else MATCH_HEIGHT_PLAYER
    width = MATCH_WIDTH_DOUBLES if options.doubles else MATCH_WIDTH
    return width, height


def parent_of(round_no: int, match_index: int) -> tuple[int, int]:
    """(round, index) of the match that the winner of this one advances to."""
    return round_no + 1, match_index // 2


def round_label(round_no: int, total_rounds: int) -> str:
    if round_no == total_rounds:
        return "Final"
    if round_no == total_rounds - 1 and total_rounds > 1:
        return "Semi-Finals"
    if round_no == total_rounds - 2 and total_rounds > 3:
        return "Quarter-Finals"
    return f"Round {round_no}"


def status_label(match: Match) -> str:
    if match.status == MatchStatus.WALKOVER:
        return "Bye"
    if match.status == MatchStatus.SCHEDULED and match.is_bye():
        return "Bye Match"
    return match.status.value.replace("_", " ").title()


def group_rounds(matches: list[Match]) -> dict[int, list[Match]]:
    """Matches per round, each round ordered by match number."""
    rounds: dict[int, list[Match]] = defaultdict(list)
    for m in matches:
        rounds[m.round].append(m)
    return {r: sorted(rounds[r], key=lambda m: m.matchNumber) for r in sorted(rounds)}


def _state(*feeders: Optional[Match]) -> str:
    return "resolved" if any(m is not None and m.winner for m in feeders) else "pending"


def _compute_centers(
    rounds: dict[int, list[Match]],
    total_rounds: int,
    total_height: float,
) -> dict[tuple[int, int], float]:
    centers: dict[tuple[int, int], float] = {}
    for i in range(len(rounds.get(total_rounds, []))):
        centers[(total_rounds, i)] = total_height / 2

    for r in sorted((r for r in rounds if r < total_rounds), reverse=True):
        current = rounds[r]
        # Half the height one match of this round owns in a perfect tree.
        half_slot = total_height / 2.0 ** (total_rounds - r) / 2
        for i in range(len(current)):
            parent = parent_of(r, i)
            if parent in centers:
                offset = -half_slot if i % 2 == 0 else half_slot
                centers[(r, i)] = centers[parent] + offset
            else:
                logger.debug("No feeder target for round %d match index %d, spacing evenly", r, i)
                centers[(r, i)] = (i + 0.5) * total_height / len(current)
    return centers


def _connectors(
    rounds: dict[int, list[Match]],
    centers: dict[tuple[int, int], float],
    round_no: int,
    index: int,
    x: float,
    width: float,
) -> list[ConnectorSegment]:
    current = rounds[round_no]
    match = current[index]
    cy = centers[(round_no, index)]
    right = x + width
    mid_x = right + ROUND_GAP / 2
    next_x = right + ROUND_GAP

    segments = [ConnectorSegment(kind="stub", x1=right, y1=cy, x2=mid_x, y2=cy, state=_state(match))]

    sibling_index = index ^ 1
    if sibling_index < len(current):
        sibling = current[sibling_index]
        mid_y = (cy + centers[(round_no, sibling_index)]) / 2
        segments.append(
            ConnectorSegment(kind="feeder", x1=mid_x, y1=cy, x2=mid_x, y2=mid_y, state=_state(match))
        )
        if index % 2 == 0:
            segments.append(
                ConnectorSegment(
                    kind="join", x1=mid_x, y1=mid_y, x2=next_x, y2=mid_y, state=_state(match, sibling)
                )
            )
        return segments

    parent_y = centers.get(parent_of(round_no, index))
    if parent_y is not None and abs(parent_y - cy) > ELBOW_MIN_OFFSET:
        segments.append(
            ConnectorSegment(kind="elbow", x1=mid_x, y1=cy, x2=mid_x, y2=parent_y, state=_state(match))
        )
        segments.append(
            ConnectorSegment(kind="join", x1=mid_x, y1=parent_y, x2=next_x, y2=parent_y, state=_state(match))
        )
    return segments


def layout_bracket(matches: list[Match], options: Optional[LayoutOptions] = None) -> BracketLayout:
    """Position every match of a knockout bracket and route its connectors."""
    options = options or LayoutOptions()
    width, height = card_size(options)
    if not matches:
        return BracketLayout(matchHeight=height, matchWidth=width, roundGap=ROUND_GAP)

    rounds = group_rounds(matches)
    total_rounds = max(rounds)
    total_height = 2.0 ** (max(total_rounds, 1) - 1) * (height + VERTICAL_GAP)
    centers = _compute_centers(rounds, total_rounds, total_height)

    round_layouts: list[RoundLayout] = []
    match_layouts: list[MatchLayout] = []
    for column, (r, round_matches) in enumerate(rounds.items()):
        x = column * (width + ROUND_GAP)
        round_layouts.append(RoundLayout(round=r, label=round_label(r, total_rounds), x=x))
        for i, m in enumerate(round_matches):
            cy = centers[(r, i)]
            connectors = _connectors(rounds, centers, r, i, x, width) if r < total_rounds else []
            match_layouts.append(
                MatchLayout(
                    matchId=m.id,
                    round=r,
                    matchIndex=i,
                    x=x,
                    topY=cy - height / 2,
                    centerY=cy,
                    connectors=connectors,
                    statusLabel=status_label(m),
                    isBye=m.status == MatchStatus.WALKOVER or m.is_bye(),
                    isChampion=(
                        r == total_rounds and m.status == MatchStatus.COMPLETED and m.winner is not None
                    ),
                )
            )

    return BracketLayout(
        rounds=round_layouts,
        matches=match_layouts,
        totalHeight=total_height,
        matchHeight=height,
        matchWidth=width,
        roundGap=ROUND_GAP,
    )
