"""ScriptShot configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptshot.exceptions import ConfigurationError, check_config_keys


class ScriptShotSettings(BaseSettings):
    """ScriptShot configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: scriptshot --debug parse episode.md

    2. Config file values (YAML, TOML, or JSON)
       Example: scriptshot --config myconfig.yaml parse episode.md
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with SCRIPTSHOT_)
       Example: export SCRIPTSHOT_LOG_LEVEL=DEBUG

    4. .env file (in current directory or specified path)

    5. Default values (defined in field declarations below)

    The parser never reads these settings; they only shape logging and the
    command-line front end.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTSHOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    # Input/output settings
    input_encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading screenplay files",
    )
    output_indent: int = Field(
        default=2,
        description="Indentation for JSON output (0 for compact)",
        ge=0,
        le=8,
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and resolve path."""
        if v is None:
            return None
        if isinstance(v, str):
            expanded = os.path.expandvars(v)
            return Path(expanded).expanduser().resolve()
        if isinstance(v, Path):
            return v.resolve()
        raise ValueError(
            f"Path fields must be string or Path. Got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @classmethod
    def from_config_files(
        cls, config_files: Iterable[Path | str]
    ) -> ScriptShotSettings:
        """Merge configuration files over environment variables and defaults.

        Later files override earlier ones. Files that have disappeared since
        they were found are skipped with a warning.
        """
        data: dict[str, Any] = {}
        for config_file in config_files:
            try:
                data.update(load_config_file(config_file))
            except FileNotFoundError:
                # Imported here: logging configuration depends on this module
                from scriptshot.config.logging import get_logger as _get_logger

                _get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )
        return cls(**data)


def _read_yaml(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _read_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


CONFIG_READERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": _read_toml,
    ".json": _read_json,
}

# Searched in order; later files override earlier ones
DISCOVERED_SUFFIXES = (".yaml", ".toml", ".json")


def load_config_file(config_path: Path | str) -> dict[str, Any]:
    """Read a YAML, TOML or JSON configuration file into a dict.

    Args:
        config_path: Path to the configuration file.

    Returns:
        The raw settings mapping, checked for common key mistakes.

    Raises:
        ConfigurationError: If the format is unsupported or the file does
            not hold a mapping.
        FileNotFoundError: If the file doesn't exist.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    reader = CONFIG_READERS.get(suffix)
    if reader is None:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix}",
            hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
            details={
                "file": str(config_path),
                "detected_format": suffix,
                "supported_formats": sorted(CONFIG_READERS),
            },
        )

    data = reader(config_path)
    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file must contain a mapping: {config_path}",
            hint="Write settings as key/value pairs, e.g. 'log_level: INFO'",
            details={"file": str(config_path), "found_type": type(data).__name__},
        )

    check_config_keys(data)
    return data


def discover_config_files() -> list[Path]:
    """Find existing config files in the user config dir and the working dir."""
    user_dir = Path.home() / ".config" / "scriptshot"
    candidates = [user_dir / f"config{suffix}" for suffix in DISCOVERED_SUFFIXES]
    candidates += [
        Path.cwd() / f"scriptshot{suffix}" for suffix in DISCOVERED_SUFFIXES
    ]
    return [path for path in candidates if path.is_file()]


# Global settings instance
_settings: ScriptShotSettings | None = None


def get_settings() -> ScriptShotSettings:
    """Get the global settings instance, loading it on first use."""
    global _settings
    if _settings is None:
        _settings = ScriptShotSettings.from_config_files(discover_config_files())
    return _settings


def set_settings(settings: ScriptShotSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the global settings so the next lookup re-reads every source."""
    global _settings
    _settings = None


def get_settings_for_cli(config_file: Path | None = None) -> ScriptShotSettings:
    """Get settings for a CLI command.

    An explicit config file replaces discovered ones; environment variables
    and ``.env`` still apply underneath it.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file is None:
        return get_settings()
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")
    return ScriptShotSettings.from_config_files([config_file])
