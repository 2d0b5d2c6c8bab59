# src/nav/grid.py
"""
MazeGrid: immutable boolean grid the turn search runs over.

This module does not parse files or validate shapes. It only:
- Stores rows of passable/wall cells.
- Exposes the fixed start/goal convention.
- Enumerates passable 4-directional neighbours.

Structural validation (ragged rows, too-small grids) belongs to the
loader in maze_io.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .directions import Direction

# (x, y) integer coordinates, y is the row index
Position = Tuple[int, int]

# Anything solve() accepts as a grid
GridLike = Union["MazeGrid", Sequence[Sequence[bool]]]


@dataclass(frozen=True)
class MazeGrid:
    """
    Rectangular grid of booleans, rows top to bottom.

    `True` marks a passable cell. Instances are immutable and can be shared
    between concurrent searches.
    """

    rows: Tuple[Tuple[bool, ...], ...]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[bool]]) -> "MazeGrid":
        """Freeze any nested iterable of truthy values into a MazeGrid."""
        return cls(rows=tuple(tuple(bool(cell) for cell in row) for row in rows))

    @classmethod
    def from_strings(cls, lines: Iterable[str], passable: str = "1") -> "MazeGrid":
        """
        Build a grid from text rows where `passable` marks open cells.

        Handy for tests and small literals; no shape checks are done.
        """
        return cls.from_rows((ch == passable for ch in line) for line in lines)

    # ------------------------------------------------------------------
    # Shape and conventions
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def start(self) -> Position:
        """Entrance: first column, second row."""
        return (0, 1)

    @property
    def goal(self) -> Position:
        """Exit: last column, second-to-last row."""
        return (self.width - 1, self.height - 2)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, pos: Position) -> bool:
        """Out-of-bounds positions are never passable."""
        if not self.in_bounds(pos):
            return False
        x, y = pos
        return self.rows[y][x]

    def neighbors_4dir(self, pos: Position) -> List[Tuple[Position, Direction]]:
        """
        Passable neighbours of `pos` with the direction used to reach them.

        Enumerated in Direction order so expansion is deterministic.
        """
        x, y = pos
        result: List[Tuple[Position, Direction]] = []
        for direction in Direction:
            dx, dy = direction.delta
            nxt = (x + dx, y + dy)
            if self.is_passable(nxt):
                result.append((nxt, direction))
        return result

    def passable_count(self) -> int:
        return sum(sum(1 for cell in row if cell) for row in self.rows)


def as_grid(grid: GridLike) -> MazeGrid:
    """Return `grid` unchanged if it is a MazeGrid, else freeze it."""
    if isinstance(grid, MazeGrid):
        return grid
    return MazeGrid.from_rows(grid)
