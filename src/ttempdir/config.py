"""Analyzer configuration and ``.ttempdir.toml`` loading."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CONFIG_FILE_NAME = ".ttempdir.toml"

FLAG_ALL_NAME = "all"
FLAG_MAX_RECURSION_LEVEL_NAME = "max-recursion-level"

DEFAULT_ALL = False
DEFAULT_MAX_RECURSION_LEVEL = 5  # only bounds pathological nesting

# Keys of the config file that belong to other components.
_NON_ANALYZER_KEYS = ("whitelist",)


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or parsed."""


class AnalyzerConfig(BaseModel):
    """Settings fixed once per run and shared by every checked function."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    all_functions: bool = Field(default=DEFAULT_ALL, alias=FLAG_ALL_NAME)
    max_recursion_level: int = Field(
        default=DEFAULT_MAX_RECURSION_LEVEL,
        ge=0,
        alias=FLAG_MAX_RECURSION_LEVEL_NAME,
    )

    def merged(self, **overrides: Any) -> "AnalyzerConfig":
        """Return a validated copy with ``overrides`` applied by field name."""
        data = self.model_dump()
        data.update(overrides)
        try:
            return AnalyzerConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid ttempdir configuration: {e}") from e


def flag_name(name: str, prefix: str = "") -> str:
    """Namespace a flag name, e.g. ``linter-all`` for prefix ``linter``."""
    return f"{prefix}-{name}" if prefix else name


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Search for .ttempdir.toml in ``start_dir`` (default: cwd) and parents."""
    current = (start_dir or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def read_config_file(config_path: Path) -> dict:
    """Parse a TOML config file into a dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML
    """
    try:
        return tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read {config_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e


def load_config(config_path: Optional[Path] = None) -> AnalyzerConfig:
    """Load analyzer settings from a config file.

    Args:
        config_path: Explicit file; when None the nearest .ttempdir.toml
            is used, and defaults apply if there is none

    Returns:
        AnalyzerConfig

    Raises:
        ConfigError: On unreadable files, bad TOML or invalid values
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return AnalyzerConfig()

    data = read_config_file(config_path)
    settings = {k: v for k, v in data.items() if k not in _NON_ANALYZER_KEYS}
    try:
        return AnalyzerConfig.model_validate(settings)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
