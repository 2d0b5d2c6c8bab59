from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .schema import LoggingSettings, OutputSettings, SearchSettings, TurnmazeSettings


class ConfigError(ValueError):
    """Raised when a config file parses but holds invalid values."""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "turnmaze.yaml"

# Names a config file to use when load_settings() gets no explicit path.
CONFIG_ENV_VAR = "TURNMAZE_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML file, treating an empty document as an empty mapping."""
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected mapping at top of {path}, got {type(data).__name__}")
    return data


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _parse_logging(raw: Dict[str, Any]) -> LoggingSettings:
    level = str(raw.get("level", LoggingSettings.level)).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {level}")
    return LoggingSettings(level=level)


def _parse_search(raw: Dict[str, Any]) -> SearchSettings:
    max_expansions = raw.get("max_expansions")
    if max_expansions is not None:
        if isinstance(max_expansions, bool) or not isinstance(max_expansions, int):
            raise ConfigError("search.max_expansions must be an integer or null")
        if max_expansions < 0:
            raise ConfigError("search.max_expansions must not be negative")

    trace = raw.get("trace", False)
    if not isinstance(trace, bool):
        raise ConfigError("search.trace must be true or false")

    trace_buffer = raw.get("trace_buffer", SearchSettings.trace_buffer)
    if isinstance(trace_buffer, bool) or not isinstance(trace_buffer, int) or trace_buffer < 1:
        raise ConfigError("search.trace_buffer must be a positive integer")

    return SearchSettings(
        max_expansions=max_expansions,
        trace=trace,
        trace_buffer=trace_buffer,
    )


def _parse_output(raw: Dict[str, Any]) -> OutputSettings:
    message = raw.get("no_solution_message", OutputSettings.no_solution_message)
    if not isinstance(message, str):
        raise ConfigError("output.no_solution_message must be a string")
    show_path = raw.get("show_path", False)
    if not isinstance(show_path, bool):
        raise ConfigError("output.show_path must be true or false")
    return OutputSettings(no_solution_message=message, show_path=show_path)


def _resolve_path(path: Optional[Union[str, Path]]) -> tuple[Path, bool]:
    """Return (config path, whether the caller asked for it explicitly)."""
    if path is not None:
        return Path(path), True
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return DEFAULT_CONFIG_PATH, False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_settings(path: Optional[Union[str, Path]] = None) -> TurnmazeSettings:
    """
    Main entry point: returns fully resolved TurnmazeSettings.

    An explicitly named file (argument or TURNMAZE_CONFIG) must exist. The
    bundled default file is optional; without it every section takes its
    defaults.
    """
    config_path, explicit = _resolve_path(path)

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Missing config file: {config_path}")
        logging.getLogger(__name__).debug(
            "no config at %s, using defaults", config_path
        )
        return TurnmazeSettings()

    raw = _load_yaml(config_path)
    return TurnmazeSettings(
        logging=_parse_logging(_section(raw, "logging")),
        search=_parse_search(_section(raw, "search")),
        output=_parse_output(_section(raw, "output")),
    )
