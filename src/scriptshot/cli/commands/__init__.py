"""ScriptShot CLI commands."""

from __future__ import annotations

from scriptshot.cli.commands.parse import parse_command

__all__ = ["parse_command"]
