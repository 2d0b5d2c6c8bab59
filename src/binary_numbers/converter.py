# src/binary_numbers/converter.py
"""
Binary digit strings -> arbitrary-precision integers.

Input lines may be thousands of bits long; Python ints have no width
limit, so int(text, 2) does the conversion once the syntax is checked.
The check is stricter than int(): no whitespace, no '0b' prefix and no
underscores are accepted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

_BINARY_RE = re.compile(r"[+-]?[01]+")


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one line."""

    source: str
    value: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def convert_binary(text: str) -> ConversionResult:
    if _BINARY_RE.fullmatch(text) is None:
        return ConversionResult(source=text, error=f"Failed to parse: {text}")
    return ConversionResult(source=text, value=int(text, 2))


def convert_numbers(lines: Iterable[str]) -> List[ConversionResult]:
    """Convert every line, keeping input order; failures do not stop the batch."""
    results = [convert_binary(line) for line in lines]
    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.warning("%d of %d lines are not binary numbers", failed, len(results))
    return results


def read_numbers_file(path: Union[str, Path]) -> List[str]:
    """
    Read the lines to convert from `path`.

    The first line is a header (the maze dimensions line when a maze file
    is reused) and is skipped.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    return lines[1:]
