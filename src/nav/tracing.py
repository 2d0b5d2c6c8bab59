# src/nav/tracing.py
"""
Optional expansion tracing for the turn search.

Nothing here influences the search; a SearchTracer only watches. When no
tracer is passed to find_min_turns, no records are built at all.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from .directions import Direction
from .grid import Position


@dataclass(frozen=True)
class ExpansionRecord:
    """One candidate taken off the frontier and expanded."""

    step: int
    position: Position
    direction: Optional[Direction]
    g: int
    f: int
    frontier_size: int
    closed_size: int


class SearchTracer:
    """
    In-memory expansion tracer with debug logging.

    Responsibilities:
    - Keep a rolling buffer of recent ExpansionRecord entries.
    - Emit one DEBUG line per expansion on the `nav.search` logger.
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 10_000,
    ) -> None:
        self._logger = logger or logging.getLogger("nav.search")
        self._records: Deque[ExpansionRecord] = deque(maxlen=max_records)
        self._outcome: Optional[str] = None

    # ------------------------------------------------------------------
    # Hooks called by the search loop
    # ------------------------------------------------------------------

    def expanded(self, record: ExpansionRecord) -> None:
        self._records.append(record)
        self._logger.debug(
            "expand step=%d pos=%s dir=%s g=%d f=%d open=%d closed=%d",
            record.step,
            record.position,
            record.direction.name if record.direction is not None else "-",
            record.g,
            record.f,
            record.frontier_size,
            record.closed_size,
        )

    def finished(self, outcome: str, turns: Optional[int], expansions: int) -> None:
        self._outcome = outcome
        self._logger.debug(
            "search finished outcome=%s turns=%s expansions=%d",
            outcome,
            turns,
            expansions,
        )

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def outcome(self) -> Optional[str]:
        return self._outcome

    def get_records(self) -> List[ExpansionRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
        self._outcome = None
