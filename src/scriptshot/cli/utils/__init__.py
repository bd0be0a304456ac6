"""CLI utilities."""

from __future__ import annotations

from scriptshot.cli.utils.cli_handler import CLIHandler

__all__ = ["CLIHandler"]
