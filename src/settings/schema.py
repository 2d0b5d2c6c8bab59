# src/settings/schema.py
"""Dataclasses for the resolved turnmaze configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoggingSettings:
    level: str = "WARNING"


@dataclass
class SearchSettings:
    """Knobs passed through to nav.find_min_turns."""
    max_expansions: Optional[int] = None  # None = unbounded
    trace: bool = False
    trace_buffer: int = 10_000


@dataclass
class OutputSettings:
    no_solution_message: str = "No solution"
    show_path: bool = False


@dataclass
class TurnmazeSettings:
    """Top-level resolved settings."""
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    search: SearchSettings = field(default_factory=SearchSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
