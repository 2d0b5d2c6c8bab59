# src/app/logging_config.py
"""
Central logging configuration for turnmaze.

Call configure_logging() from the entrypoint once, for example:

    from app.logging_config import configure_logging
    configure_logging("DEBUG")

Library modules only create loggers; they never attach handlers. Records
go to stderr so stdout carries only command output.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Accept logging.DEBUG style ints or names like "debug"."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: default logging level (e.g., logging.INFO or "DEBUG")
    """
    root = logging.getLogger()
    numeric = resolve_level(level)

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(numeric)
