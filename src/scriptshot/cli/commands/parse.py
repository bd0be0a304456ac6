"""Parse screenplay text into structured scenes."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from scriptshot.cli.formatters import JsonFormatter, OutputFormat, ScreenplayFormatter
from scriptshot.cli.utils.cli_handler import CLIHandler
from scriptshot.cli.validators import ScreenplayFileValidator, ValidationError
from scriptshot.config import get_logger, get_settings_for_cli
from scriptshot.exceptions import ScriptShotError
from scriptshot.parser import ScreenplayParser, Screenplay

logger = get_logger(__name__)
console = Console()
err_console = Console(stderr=True)

STDIN_SOURCE = "<stdin>"


def _parse_sources(
    files: list[Path],
    stdin_text: str | None,
    parser: ScreenplayParser,
) -> tuple[list[tuple[str, Screenplay | None]], list[tuple[str, str]]]:
    """Parse every input, collecting results and per-source failures."""
    results: list[tuple[str, Screenplay | None]] = []
    failures: list[tuple[str, str]] = []
    validator = ScreenplayFileValidator()

    if stdin_text is not None:
        screenplay = parser.parse(stdin_text)
        results.append((STDIN_SOURCE, screenplay))
        if screenplay is None:
            failures.append((STDIN_SOURCE, "no scenes found"))

    for file_path in files:
        source = str(file_path)
        try:
            screenplay = parser.parse_file(validator.validate(file_path))
        except (ValidationError, ScriptShotError) as e:
            logger.warning("Skipping screenplay source", source=source, error=str(e))
            failures.append((source, str(e).splitlines()[0]))
            continue
        results.append((source, screenplay))
        if screenplay is None:
            failures.append((source, "no scenes found"))

    return results, failures


def _json_payload(results: list[tuple[str, Screenplay | None]]) -> Any:
    if len(results) == 1:
        return results[0][1]
    return [{"source": source, "screenplay": doc} for source, doc in results]


def parse_command(
    files: Annotated[
        list[Path] | None,
        typer.Argument(help="Screenplay text files (.md, .txt, .fountain)"),
    ] = None,
    stdin: Annotated[
        bool,
        typer.Option("--stdin", help="Read screenplay text from stdin"),
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the structured screenplay as JSON")
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the JSON document to this file"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
) -> None:
    """Parse screenplay text into acts, scenes, dialogue and actions.

    Every input is processed even when some fail; the command exits with
    code 1 if any input produced no scenes.
    """
    handler = CLIHandler(console)

    try:
        settings = get_settings_for_cli(config_file=config)
    except (FileNotFoundError, ScriptShotError, ValueError) as e:
        handler.handle_error(e, json_output)
        return

    files = files or []
    stdin_text = handler.read_stdin(required=True) if stdin or not files else None

    parser = ScreenplayParser(encoding=settings.input_encoding)
    results, failures = _parse_sources(files, stdin_text, parser)

    json_formatter = JsonFormatter(indent=settings.output_indent)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json_formatter.format(_json_payload(results)) + "\n", encoding="utf-8"
        )
        if not json_output:
            handler.handle_success(f"Wrote {len(results)} result(s) to {output}")

    if json_output:
        # Plain print keeps the JSON free of rich markup
        print(json_formatter.format(_json_payload(results)))
    elif output is None:
        formatter = ScreenplayFormatter(console)
        for source, screenplay in results:
            if screenplay is None:
                continue
            console.print(f"[bold cyan]{source}[/bold cyan]", soft_wrap=True)
            # Already rendered; print without re-wrapping or markup parsing
            console.print(
                formatter.format(screenplay, OutputFormat.TABLE),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    if failures:
        for source, reason in failures:
            err_console.print(
                f"[red]Failed:[/red] {source}: {reason}",
                highlight=False,
                soft_wrap=True,
            )
        raise typer.Exit(1)
