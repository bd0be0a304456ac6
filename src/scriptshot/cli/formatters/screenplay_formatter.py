"""Screenplay summary formatter for CLI."""

from __future__ import annotations

import io
from typing import Any

from rich.console import Console
from rich.table import Table

from scriptshot.cli.formatters.base import OutputFormat, OutputFormatter
from scriptshot.cli.formatters.json_formatter import JsonFormatter
from scriptshot.parser import Screenplay


class ScreenplayFormatter(OutputFormatter[Screenplay]):
    """Formatter for parsed screenplays."""

    def format(
        self, data: Screenplay, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format a parsed screenplay.

        Args:
            data: Parsed screenplay
            format_type: JSON for the full document, anything else for a
                per-scene summary table

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        return self._render(self._build_scene_table(data), self._summary(data))

    def scene_rows(self, screenplay: Screenplay) -> list[dict[str, Any]]:
        """One summary row per scene."""
        return [
            {
                "scene": scene.scene_number,
                "location": scene.location,
                "setting": f"{scene.time_of_day} / {scene.time_period}",
                "characters": len(scene.characters),
                "dialogue_blocks": len(scene.dialogue),
                "actions": len(scene.action),
                "duration": f"{scene.duration_estimate}s",
            }
            for scene in screenplay.scenes
        ]

    def _build_scene_table(self, screenplay: Screenplay) -> Table:
        rows = self.scene_rows(screenplay)
        table = Table(title="Scenes", show_header=True, header_style="bold magenta")
        for column in rows[0]:
            table.add_column(column.replace("_", " ").title())
        for row in rows:
            table.add_row(*[str(value) for value in row.values()])
        return table

    def _summary(self, screenplay: Screenplay) -> str:
        lines = []
        for act in screenplay.acts:
            lines.append(f"[cyan]Act {act.act_number}[/cyan]: {act.title}")
        lines.append(
            f"[green]{len(screenplay.scenes)} "
            f"scene{'s' if len(screenplay.scenes) != 1 else ''}, "
            f"{len(screenplay.characters)} characters, "
            f"~{screenplay.total_duration}s total[/green]"
        )
        return "\n".join(lines)

    def _render(self, table: Table, summary: str) -> str:
        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=False, width=120)
        temp_console.print(table)
        temp_console.print(summary)
        return string_io.getvalue()
