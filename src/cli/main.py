# src/cli/main.py
"""
turnmaze command line.

    turnmaze maze PATH [--max-expansions N] [--trace] [--show-path]
    turnmaze numbers PATH

Flags override values from the YAML config (see settings.loader).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from app.logging_config import configure_logging
from binary_numbers import convert_numbers, read_numbers_file
from maze_io import read_maze_file
from nav import MazeGrid, Position, SearchTracer, find_min_turns
from nav.pathfinder import REASON_EXHAUSTED
from settings import TurnmazeSettings, load_settings

logger = logging.getLogger(__name__)


def _stdout() -> Console:
    # soft_wrap keeps very long integers on one line
    return Console(file=sys.stdout, highlight=False, markup=False, soft_wrap=True)


def _stderr() -> Console:
    return Console(file=sys.stderr, highlight=False, markup=False, soft_wrap=True)


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="turnmaze",
        description="Minimum-turn maze solver and binary number converter.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (default: config/turnmaze.yaml or $TURNMAZE_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override logging.level from the config (e.g. DEBUG, INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    maze = sub.add_parser("maze", help="Print the minimum number of turns through a maze")
    maze.add_argument("path", help="Maze file: '<width>,<height>' header then rows of 1/0")
    maze.add_argument(
        "--max-expansions",
        type=_non_negative_int,
        default=None,
        help="Give up after this many search expansions",
    )
    maze.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Log every search expansion at DEBUG level",
    )
    maze.add_argument(
        "--show-path",
        action="store_true",
        default=None,
        help="Also draw the maze with the chosen path",
    )

    numbers = sub.add_parser("numbers", help="Convert binary lines (after the header) to integers")
    numbers.add_argument("path", help="Text file; the first line is skipped")

    return parser


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def render_path(grid: MazeGrid, path: Sequence[Position]) -> Text:
    """Draw the grid with walls as '#', open cells as '.', path cells as '*'."""
    on_path = set(path)
    text = Text()
    for y, row in enumerate(grid.rows):
        for x, passable in enumerate(row):
            if (x, y) in on_path:
                text.append("*", style="bold green")
            elif passable:
                text.append(".")
            else:
                text.append("#", style="dim")
        text.append("\n")
    return text


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _run_maze(args: argparse.Namespace, cfg: TurnmazeSettings) -> int:
    out = _stdout()
    max_expansions = (
        args.max_expansions if args.max_expansions is not None else cfg.search.max_expansions
    )
    trace = args.trace if args.trace is not None else cfg.search.trace
    show_path = args.show_path if args.show_path is not None else cfg.output.show_path

    grid = read_maze_file(args.path)
    tracer = None
    if trace:
        tracer = SearchTracer(max_records=cfg.search.trace_buffer)
        logging.getLogger("nav.search").setLevel(logging.DEBUG)

    result = find_min_turns(grid, max_expansions=max_expansions, tracer=tracer)
    logger.info(
        "solved %s: success=%s turns=%s expansions=%d",
        args.path,
        result.success,
        result.turns,
        result.expansions,
    )

    if result.turns is None:
        if result.reason == REASON_EXHAUSTED:
            logger.warning("search stopped after %d expansions", result.expansions)
        out.print(cfg.output.no_solution_message)
        return 0

    out.print(str(result.turns))
    if show_path:
        out.print(render_path(grid, result.path), end="")
    return 0


def _run_numbers(args: argparse.Namespace, cfg: TurnmazeSettings) -> int:
    out = _stdout()
    results = convert_numbers(read_numbers_file(args.path))

    # Values may run to thousands of decimal digits.
    previous_limit = _int_str_digit_limit()
    _set_int_str_digit_limit(0)
    try:
        for result in results:
            if result.ok:
                out.print(str(result.value))
            else:
                out.print(result.error)
    finally:
        _set_int_str_digit_limit(previous_limit)
    return 0


def _int_str_digit_limit() -> int:
    getter = getattr(sys, "get_int_max_str_digits", None)
    return getter() if getter is not None else 0


def _set_int_str_digit_limit(limit: int) -> None:
    # Only Python 3.11+ (and patched 3.10 builds) cap int-to-str conversion.
    setter = getattr(sys, "set_int_max_str_digits", None)
    if setter is not None:
        setter(limit)


_COMMANDS = {
    "maze": _run_maze,
    "numbers": _run_numbers,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_settings(args.config)
        configure_logging(args.log_level or cfg.logging.level)
        return _COMMANDS[args.command](args, cfg)
    except (OSError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        _stderr().print(f"error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
