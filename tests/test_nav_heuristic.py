# tests/test_nav_heuristic.py
"""
Tests for nav.heuristic.turn_heuristic.

Admissibility is checked against the exhaustive reference on open grids:
for every position, arrival direction and goal the estimate may not
exceed the true number of remaining turns.
"""

from __future__ import annotations

import pytest

from fakes.reference_solver import min_turns_from, open_grid
from nav import Direction, turn_heuristic

GOAL = (6, 3)


def test_zero_at_goal_for_any_direction() -> None:
    for direction in (None, *Direction):
        assert turn_heuristic(direction, GOAL, GOAL) == 0


def test_zero_without_direction() -> None:
    assert turn_heuristic(None, (0, 0), GOAL) == 0


@pytest.mark.parametrize(
    "position, expected",
    [
        ((2, 3), 0),  # on the goal row
        ((2, 0), 1),  # above the goal row
        ((2, 5), 1),  # below the goal row
        ((6, 0), 1),  # goal column, goal below
    ],
)
def test_moving_right(position, expected) -> None:
    assert turn_heuristic(Direction.RIGHT, position, GOAL) == expected


@pytest.mark.parametrize(
    "position, expected",
    [
        ((6, 5), 0),  # goal straight ahead
        ((6, 1), 1),  # goal straight behind: one reversal
        ((2, 5), 1),  # goal ahead and to the side
        ((2, 1), 2),  # goal behind and to the side
        ((2, 3), 1),  # on the goal row: turn right here
    ],
)
def test_moving_up(position, expected) -> None:
    assert turn_heuristic(Direction.UP, position, GOAL) == expected


@pytest.mark.parametrize(
    "position, expected",
    [
        ((6, 1), 0),
        ((6, 5), 1),
        ((2, 1), 1),
        ((2, 5), 2),
        ((2, 3), 1),
    ],
)
def test_moving_down(position, expected) -> None:
    assert turn_heuristic(Direction.DOWN, position, GOAL) == expected


@pytest.mark.parametrize(
    "position, expected",
    [
        ((2, 3), 1),  # goal row, goal behind
        ((2, 0), 2),
        ((2, 5), 2),
    ],
)
def test_moving_left(position, expected) -> None:
    assert turn_heuristic(Direction.LEFT, position, GOAL) == expected


@pytest.mark.parametrize("width, height", [(3, 3), (4, 5), (6, 4)])
def test_admissible_on_open_grids(width: int, height: int) -> None:
    grid = open_grid(width, height)
    cells = [(x, y) for y in range(height) for x in range(width)]

    for goal in cells:
        for position in cells:
            for direction in Direction:
                true_cost = min_turns_from(grid, position, direction, goal)
                assert true_cost is not None
                estimate = turn_heuristic(direction, position, goal)
                assert estimate <= true_cost, (direction, position, goal)


def test_consistent_along_every_move() -> None:
    # h(s) <= cost(s, s') + h(s') for every move on a 5x5 grid.
    grid = open_grid(5, 5)
    cells = [(x, y) for y in range(5) for x in range(5)]

    for goal in cells:
        for position in cells:
            for heading in Direction:
                here = turn_heuristic(heading, position, goal)
                for nxt, step in grid.neighbors_4dir(position):
                    cost = 0 if step is heading else 1
                    assert here <= cost + turn_heuristic(step, nxt, goal)
