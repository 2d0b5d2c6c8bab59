# src/nav/directions.py
"""
Cardinal movement directions for the turn-counting search.

The enum value doubles as the tie-break rank used by the frontier, so the
declaration order below is the fixed total order: DOWN < UP < RIGHT < LEFT.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple


class Direction(IntEnum):
    """One step on the grid. y grows downward (row index)."""

    DOWN = 0
    UP = 1
    RIGHT = 2
    LEFT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}

# Rank of the synthetic start candidate, which has no arrival direction.
NO_DIRECTION_RANK = -1


def direction_rank(direction: Optional[Direction]) -> int:
    """Tie-break rank; the absent direction sorts first."""
    if direction is None:
        return NO_DIRECTION_RANK
    return int(direction)


def is_turn(previous: Optional[Direction], nxt: Direction) -> bool:
    """
    True when moving in `nxt` after arriving via `previous` changes direction.

    The very first move (no previous direction) is never a turn. A reversal
    counts as a single turn like any other change.
    """
    return previous is not None and previous is not nxt
