"""Input validators for ScriptShot CLI."""

from __future__ import annotations

from scriptshot.cli.validators.base import ValidationError, Validator
from scriptshot.cli.validators.file_validator import (
    ConfigFileValidator,
    FileValidator,
    ScreenplayFileValidator,
)

__all__ = [
    "ConfigFileValidator",
    "FileValidator",
    "ScreenplayFileValidator",
    "ValidationError",
    "Validator",
]
