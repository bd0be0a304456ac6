"""Output formatters for ScriptShot CLI."""

from __future__ import annotations

from scriptshot.cli.formatters.base import OutputFormat, OutputFormatter
from scriptshot.cli.formatters.json_formatter import JsonFormatter
from scriptshot.cli.formatters.screenplay_formatter import ScreenplayFormatter

__all__ = [
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "ScreenplayFormatter",
]
