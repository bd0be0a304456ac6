"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console

from scriptshot.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def __init__(self, console: Console | None = None, indent: int | None = 2) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output
            indent: JSON indentation; 0 or None for compact output
        """
        super().__init__(console)
        self.indent = indent or None

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format data as JSON.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        return json.dumps(self._to_jsonable(data), default=str, indent=self.indent)

    def _to_jsonable(self, data: Any) -> Any:
        if hasattr(data, "model_dump"):
            # Pydantic models
            return data.model_dump(mode="json")
        if isinstance(data, dict):
            return {key: self._to_jsonable(value) for key, value in data.items()}
        if isinstance(data, list | tuple):
            return [self._to_jsonable(item) for item in data]
        return data

    def format_success(self, message: str, data: Any = None) -> str:
        """Format a success response."""
        response: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            response["data"] = self._to_jsonable(data)
        return json.dumps(response, default=str, indent=self.indent)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response."""
        error_msg = str(error) if isinstance(error, Exception) else error
        response = {"success": False, "error": error_msg, "code": code}
        return json.dumps(response, indent=self.indent)
