# src/nav/__init__.py
"""
Turn-minimizing navigation over boolean maze grids.

Provides:
- MazeGrid: immutable grid with the fixed entrance/exit convention
- Direction: cardinal moves with a fixed tie-break order
- turn_heuristic: admissible remaining-turn estimate
- find_min_turns / solve: A* search minimizing direction changes
- SearchTracer: opt-in expansion tracing
"""

from __future__ import annotations

from .directions import Direction, direction_rank, is_turn
from .grid import GridLike, MazeGrid, Position, as_grid
from .heuristic import turn_heuristic
from .pathfinder import (
    Candidate,
    TurnSearchResult,
    count_turns,
    find_min_turns,
    solve,
)
from .tracing import ExpansionRecord, SearchTracer

__all__ = [
    "Direction",
    "direction_rank",
    "is_turn",
    "GridLike",
    "MazeGrid",
    "Position",
    "as_grid",
    "turn_heuristic",
    "Candidate",
    "TurnSearchResult",
    "count_turns",
    "find_min_turns",
    "solve",
    "ExpansionRecord",
    "SearchTracer",
]
