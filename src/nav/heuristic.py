# src/nav/heuristic.py
"""
Turn-count heuristic for the A* search.

h(direction, position, goal) is the number of turns still needed to reach
the goal from `position` when the last move was `direction`, on a grid
with no walls at all. Removing walls only adds edges, so this is a lower
bound on the real remaining turns (admissible) and it obeys the triangle
inequality along every real edge (consistent).

Case table, with `ahead` the goal offset along the line of travel and
`side` the offset across it:

    side == 0, ahead > 0   -> 0   keep going
    side == 0, ahead < 0   -> 1   reverse once
    side != 0, ahead >= 0  -> 1   turn towards the goal row/column
    side != 0, ahead < 0   -> 2   turn aside, then turn back

For RIGHT moves with the goal in the last column this reduces to
0 on the goal row and 1 elsewhere.
"""

from __future__ import annotations

from typing import Optional

from .directions import Direction
from .grid import Position


def turn_heuristic(
    direction: Optional[Direction],
    position: Position,
    goal: Position,
) -> int:
    if position == goal or direction is None:
        return 0

    dx = goal[0] - position[0]
    dy = goal[1] - position[1]
    ux, uy = direction.delta

    # Projection onto the direction of travel and onto its normal.
    ahead = dx * ux + dy * uy
    side = dx * uy - dy * ux

    if side == 0:
        return 0 if ahead > 0 else 1
    return 1 if ahead >= 0 else 2
