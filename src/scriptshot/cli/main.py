"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

import scriptshot
from scriptshot.cli.commands import parse_command
from scriptshot.cli.formatters.json_formatter import JsonFormatter
from scriptshot.cli.validators.base import ValidationError
from scriptshot.cli.validators.file_validator import ConfigFileValidator
from scriptshot.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptshot.exceptions import ScriptShotError

logger = get_logger(__name__)
console = Console()

DESCRIPTION = "Structure AI-authored screenplay text for video generation"

app = typer.Typer(
    name="scriptshot",
    help=DESCRIPTION,
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show ScriptShot version."""
    version_info = {
        "name": "ScriptShot",
        "version": scriptshot.__version__,
        "description": DESCRIPTION,
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"ScriptShot v{version_info['version']}")


def _reconfigure_logging(level: str, debug: bool = False) -> None:
    """Re-read settings with a new log level and reconfigure logging."""
    os.environ["SCRIPTSHOT_LOG_LEVEL"] = level
    if debug:
        os.environ["SCRIPTSHOT_DEBUG"] = "true"
    clear_settings_cache()
    configure_logging(get_settings())


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            envvar="SCRIPTSHOT_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        _reconfigure_logging("DEBUG", debug=True)
        logger.debug("Debug mode enabled")
    elif verbose:
        _reconfigure_logging("INFO")
        logger.info("Verbose mode enabled")

    if config:
        try:
            config_path = ConfigFileValidator().validate(config)
            settings = get_settings_for_cli(config_file=config_path)
        except (ValidationError, ScriptShotError, ValueError) as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e
        logger.debug(f"Loaded configuration from {config_path}")
        set_settings(settings)
        configure_logging(settings)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
