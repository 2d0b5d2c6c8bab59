# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for test imports like `import nav`, `import maze_io`,
# and tests/ for the shared helpers in tests/fakes.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
TESTS_ROOT = PROJECT_ROOT / "tests"

for _path in (SRC_ROOT, TESTS_ROOT):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

DATA_DIR = TESTS_ROOT / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def example_maze_path() -> Path:
    """The 9x8 snake maze that needs 4 turns."""
    return DATA_DIR / "maze.in"
