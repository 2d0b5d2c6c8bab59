# src/maze_io/loader.py
"""
Maze text format loader.

Format:
    <width>,<height>
    <row 0: exactly width characters>
    ...
    <row height-1>

'1' marks a passable cell; any other character is a wall. This is the
only place that checks grid shape: the search in nav assumes a
rectangular grid of at least 2x2.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple, Union

from nav.grid import MazeGrid

logger = logging.getLogger(__name__)

PASSABLE_CHAR = "1"
MIN_SIDE = 2


class MazeFormatError(ValueError):
    """Raised when maze text does not match the expected format."""


def _parse_header(line: str) -> Tuple[int, int]:
    parts = line.split(",")
    if len(parts) != 2:
        raise MazeFormatError(
            f"line 1: expected '<width>,<height>', got {line!r}"
        )
    try:
        width, height = (int(p.strip()) for p in parts)
    except ValueError:
        raise MazeFormatError(
            f"line 1: dimensions must be integers, got {line!r}"
        ) from None
    if width < MIN_SIDE or height < MIN_SIDE:
        raise MazeFormatError(
            f"line 1: maze must be at least {MIN_SIDE}x{MIN_SIDE}, got {width}x{height}"
        )
    return width, height


def parse_maze_text(text: str) -> MazeGrid:
    """Parse maze text into a MazeGrid, raising MazeFormatError on bad shape."""
    lines: List[str] = text.splitlines()

    # Tolerate trailing blank lines (editors add them).
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise MazeFormatError("empty maze file")

    width, height = _parse_header(lines[0])
    rows = lines[1:]

    if len(rows) != height:
        raise MazeFormatError(f"expected {height} rows, got {len(rows)}")

    for index, row in enumerate(rows):
        if len(row) != width:
            raise MazeFormatError(
                f"line {index + 2}: expected {width} characters, got {len(row)}"
            )

    grid = MazeGrid.from_strings(rows, passable=PASSABLE_CHAR)
    logger.debug(
        "parsed maze %dx%d with %d passable cells",
        width,
        height,
        grid.passable_count(),
    )
    return grid


def read_maze_file(path: Union[str, Path]) -> MazeGrid:
    """Load a maze from disk. File-system errors propagate unchanged."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        text = f.read()
    logger.debug("loading maze from %s", path)
    return parse_maze_text(text)
