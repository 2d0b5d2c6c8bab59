"""Process-level wiring shared by entrypoints."""

from .logging_config import configure_logging, resolve_level

__all__ = ["configure_logging", "resolve_level"]
