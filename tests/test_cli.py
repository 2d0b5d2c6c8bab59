# tests/test_cli.py
"""
Tests for the turnmaze command line (cli.main).

Commands run in-process through main(argv); output is read with capsys.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cli.main import build_parser, main, render_path
from nav import MazeGrid, find_min_turns
from settings.loader import CONFIG_ENV_VAR

UNREACHABLE = "3,3\n000\n110\n000\n"


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_maze_prints_turn_count(example_maze_path: Path, capsys) -> None:
    assert main(["maze", str(example_maze_path)]) == 0
    assert capsys.readouterr().out.strip() == "4"


def test_maze_without_solution(tmp_path: Path, capsys) -> None:
    path = write(tmp_path, "blocked.in", UNREACHABLE)

    assert main(["maze", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "No solution"


def test_no_solution_message_from_config(tmp_path: Path, capsys) -> None:
    maze = write(tmp_path, "blocked.in", UNREACHABLE)
    cfg = write(tmp_path, "cfg.yaml", "output:\n  no_solution_message: 'no way out'\n")

    assert main(["--config", str(cfg), "maze", str(maze)]) == 0
    assert capsys.readouterr().out.strip() == "no way out"


def test_max_expansions_flag_overrides_config(
    tmp_path: Path, example_maze_path: Path, capsys
) -> None:
    cfg = write(tmp_path, "cfg.yaml", "search:\n  max_expansions: 100000\n")

    code = main(["--config", str(cfg), "maze", str(example_maze_path), "--max-expansions", "1"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "No solution"


def test_show_path_draws_grid(example_maze_path: Path, capsys) -> None:
    assert main(["maze", str(example_maze_path), "--show-path"]) == 0

    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert lines[0] == "4"
    drawing = lines[1:]
    assert len(drawing) == 8
    assert all(len(line) == 9 for line in drawing)
    assert drawing[0] == "#########"
    assert drawing[1][0] == "*"
    assert drawing[6][8] == "*"


def test_render_path_marks_cells() -> None:
    grid = MazeGrid.from_strings(["000", "111", "010"])
    result = find_min_turns(grid)

    text = render_path(grid, result.path)

    assert text.plain == "###\n***\n#.#\n"


def test_trace_flag_logs_expansions(example_maze_path: Path, caplog, capsys) -> None:
    with caplog.at_level(logging.DEBUG, logger="nav.search"):
        assert main(["maze", str(example_maze_path), "--trace"]) == 0

    assert any(r.name == "nav.search" for r in caplog.records)
    assert capsys.readouterr().out.strip() == "4"


def test_numbers_command(example_maze_path: Path, capsys) -> None:
    assert main(["numbers", str(example_maze_path)]) == 0

    out = capsys.readouterr().out.split()
    assert out == ["0", "494", "170", "186", "130", "242", "159", "0"]


def test_numbers_reports_bad_lines(tmp_path: Path, capsys) -> None:
    path = write(tmp_path, "nums.txt", "header\n101\n113\n")

    assert main(["numbers", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["5", "Failed to parse: 113"]


def test_missing_file_exits_with_error(tmp_path: Path, capsys) -> None:
    assert main(["maze", str(tmp_path / "missing.in")]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_malformed_maze_exits_with_error(tmp_path: Path, capsys) -> None:
    path = write(tmp_path, "bad.in", "3,3\n111\n11\n111\n")

    assert main(["maze", str(path)]) == 1
    assert "line 3: expected 3 characters" in capsys.readouterr().err


def test_bad_config_exits_with_error(tmp_path: Path, example_maze_path: Path, capsys) -> None:
    cfg = write(tmp_path, "cfg.yaml", "logging:\n  level: LOUD\n")

    assert main(["--config", str(cfg), "maze", str(example_maze_path)]) == 1
    assert "Unknown log level" in capsys.readouterr().err


def test_command_is_required() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args([])
    assert excinfo.value.code == 2


def test_numbers_prints_very_wide_values(tmp_path: Path, capsys) -> None:
    digits = "1" * 20_000
    path = write(tmp_path, "wide.txt", "header\n" + digits + "\n101\n")

    assert main(["numbers", str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[1] == "5"
    # 2**20000 - 1 has 6021 decimal digits and ends in ...375
    assert len(lines[0]) == 6021
    assert lines[0].endswith("375")


def test_negative_max_expansions_is_rejected(example_maze_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["maze", str(example_maze_path), "--max-expansions", "-5"])

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "must not be negative" in captured.err


def test_zero_max_expansions_is_accepted(example_maze_path: Path, capsys) -> None:
    assert main(["maze", str(example_maze_path), "--max-expansions", "0"]) == 0
    assert capsys.readouterr().out.strip() == "No solution"
