# src/nav/pathfinder.py
"""
A* search for the minimum number of turns across a MazeGrid.

- Cost of a move is 0 when it continues the previous direction (or is the
  first move) and 1 otherwise.
- Heuristic: nav.heuristic.turn_heuristic.
- Search states are (position, arrival direction); two arrivals at one
  cell with equal turn counts but different headings are not
  interchangeable.
- Frontier is a binary heap ordered by (f, direction rank, position) with
  a side table of best known f per state; superseded heap entries are
  dropped lazily when popped.
- Optional max_expansions guard for callers that need bounded latency.

This function does no I/O. Tracing is opt-in through a SearchTracer.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .directions import Direction, direction_rank, is_turn
from .grid import GridLike, Position, as_grid
from .heuristic import turn_heuristic
from .tracing import ExpansionRecord, SearchTracer

logger = logging.getLogger(__name__)

State = Tuple[Position, Optional[Direction]]

REASON_NO_PATH = "no_path_found"
REASON_EXHAUSTED = "max_expansions_exhausted"


@dataclass(frozen=True, order=True)
class Candidate:
    """
    Frontier entry. Ordering uses f, then direction rank, then position;
    g and the direction itself do not take part in comparisons.
    """

    f: int
    direction_rank: int
    position: Position
    g: int = field(compare=False)
    direction: Optional[Direction] = field(compare=False)

    @property
    def state(self) -> State:
        return (self.position, self.direction)


@dataclass
class TurnSearchResult:
    """Structured result for a turn search."""

    turns: Optional[int]
    success: bool
    path: List[Position]
    expansions: int
    reason: str | None = None


def _candidate(
    position: Position,
    direction: Optional[Direction],
    g: int,
    f: int,
) -> Candidate:
    return Candidate(
        f=f,
        direction_rank=direction_rank(direction),
        position=position,
        g=g,
        direction=direction,
    )


def find_min_turns(
    grid: GridLike,
    *,
    max_expansions: Optional[int] = None,
    tracer: Optional[SearchTracer] = None,
) -> TurnSearchResult:
    """
    Search for the turn-minimal route from grid.start to grid.goal.

    Returns a TurnSearchResult with:
      - turns: minimal number of direction changes, or None
      - path: positions from start to goal (empty on failure)
      - expansions: candidates expanded before the answer was known
      - reason: if not success, "no_path_found" or
        "max_expansions_exhausted"

    The start cell is seeded without checking its passability; every
    other cell is entered only if passable.
    """
    maze = as_grid(grid)
    start, goal = maze.start, maze.goal

    seed = _candidate(start, None, g=0, f=0)
    frontier: List[Candidate] = [seed]
    open_f: Dict[State, int] = {seed.state: 0}
    closed: Dict[State, int] = {}
    came_from: Dict[State, State] = {}

    expansions = 0

    while frontier:
        current = heapq.heappop(frontier)
        state = current.state

        # Superseded by a cheaper entry, or already finalized.
        if open_f.get(state) != current.f:
            continue

        if current.position == goal:
            path = _reconstruct_path(came_from, state)
            return _finish(
                tracer,
                TurnSearchResult(
                    turns=current.g,
                    success=True,
                    path=path,
                    expansions=expansions,
                ),
            )

        if max_expansions is not None and expansions >= max_expansions:
            return _finish(
                tracer,
                TurnSearchResult(
                    turns=None,
                    success=False,
                    path=[],
                    expansions=expansions,
                    reason=REASON_EXHAUSTED,
                ),
            )

        expansions += 1
        del open_f[state]

        if tracer is not None:
            tracer.expanded(
                ExpansionRecord(
                    step=expansions,
                    position=current.position,
                    direction=current.direction,
                    g=current.g,
                    f=current.f,
                    frontier_size=len(open_f),
                    closed_size=len(closed),
                )
            )

        for nxt, direction in maze.neighbors_4dir(current.position):
            g_new = current.g + 1 if is_turn(current.direction, direction) else current.g
            f_new = g_new + turn_heuristic(direction, nxt, goal)
            key: State = (nxt, direction)

            finalized = closed.get(key)
            if finalized is not None and finalized <= f_new:
                continue
            known = open_f.get(key)
            if known is not None and known <= f_new:
                continue

            # Reopen if it was finalized at a worse f.
            closed.pop(key, None)
            open_f[key] = f_new
            came_from[key] = state
            heapq.heappush(frontier, _candidate(nxt, direction, g=g_new, f=f_new))

        closed[state] = current.f

    return _finish(
        tracer,
        TurnSearchResult(
            turns=None,
            success=False,
            path=[],
            expansions=expansions,
            reason=REASON_NO_PATH,
        ),
    )


def solve(grid: GridLike) -> Optional[int]:
    """Minimum number of turns from entrance to exit, or None if unreachable."""
    return find_min_turns(grid).turns


def count_turns(path: List[Position]) -> int:
    """Number of direction changes along a sequence of adjacent positions."""
    turns = 0
    previous: Optional[Tuple[int, int]] = None
    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        step = (x1 - x0, y1 - y0)
        if previous is not None and step != previous:
            turns += 1
        previous = step
    return turns


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------


def _finish(tracer: Optional[SearchTracer], result: TurnSearchResult) -> TurnSearchResult:
    outcome = "found" if result.success else (result.reason or REASON_NO_PATH)
    logger.debug(
        "turn search %s: turns=%s expansions=%d",
        outcome,
        result.turns,
        result.expansions,
    )
    if tracer is not None:
        tracer.finished(outcome, result.turns, result.expansions)
    return result


def _reconstruct_path(came_from: Dict[State, State], current: State) -> List[Position]:
    """Walk came_from back to the seed state."""
    path: List[Position] = [current[0]]
    while current in came_from:
        current = came_from[current]
        path.append(current[0])
    path.reverse()
    return path
