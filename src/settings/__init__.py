"""Configuration loading for turnmaze."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, load_settings
from .schema import LoggingSettings, OutputSettings, SearchSettings, TurnmazeSettings

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "load_settings",
    "LoggingSettings",
    "OutputSettings",
    "SearchSettings",
    "TurnmazeSettings",
]
