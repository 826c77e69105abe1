"""Configuration for mathgreet."""

from settings.config import (
    CONFIG_FILENAME,
    ConfigError,
    LogLevelName,
    MathGreetConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "LogLevelName",
    "MathGreetConfig",
    "load_config",
]
