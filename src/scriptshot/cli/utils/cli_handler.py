"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

import sys
from typing import Any

import typer
from rich.console import Console

from scriptshot.cli.formatters.json_formatter import JsonFormatter
from scriptshot.cli.validators.base import ValidationError
from scriptshot.config import get_logger

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Handle and display errors consistently.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        error_msg = str(error)
        logger.error(f"Command failed: {error_msg}", exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error_msg}[/red]")
        else:
            self.console.print(f"[red]Error: {error_msg}[/red]")

        raise typer.Exit(exit_code)

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Handle success responses consistently."""
        if json_output:
            print(self.json_formatter.format_success(message, data))
        else:
            self.console.print(f"[green]{message}[/green]")

    def read_stdin(self, required: bool = True) -> str | None:
        """Read content from stdin.

        Args:
            required: Whether stdin content is required

        Returns:
            Content from stdin or None

        Raises:
            typer.Exit: If required and no content available
        """
        if sys.stdin.isatty():
            if required:
                self.console.print(
                    "[red]Error: No input provided. "
                    "Pass screenplay files or pipe text to --stdin[/red]"
                )
                raise typer.Exit(1)
            return None
        return sys.stdin.read()
