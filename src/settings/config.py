from __future__ import annotations

from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arith.ops import OverflowMode

CONFIG_FILENAME = "mathgreet.toml"

LogLevelName = Literal["debug", "info", "warning", "error", "critical"]


class MathGreetConfig(BaseModel):
    """Configuration for the mathgreet command line."""

    model_config = ConfigDict(extra="forbid")

    overflow: OverflowMode = Field(
        default="wrap",
        description="How add() treats sums outside the i32 range",
    )
    default_name: str = Field(
        default="World",
        description="Name greeted when none is given on the command line",
    )
    log_level: LogLevelName = Field(
        default="warning",
        description="Root logger level for the command line",
    )


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> MathGreetConfig:
    """Load configuration from mathgreet.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return MathGreetConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return MathGreetConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
