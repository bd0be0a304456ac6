"""File path validators for CLI input."""

from __future__ import annotations

from pathlib import Path

from scriptshot.cli.validators.base import ValidationError, Validator

SCREENPLAY_EXTENSIONS = [".md", ".markdown", ".txt", ".fountain"]


class FileValidator(Validator[Path]):
    """Validator for file paths."""

    def __init__(
        self,
        must_exist: bool = True,
        must_be_file: bool = True,
        extensions: list[str] | None = None,
    ) -> None:
        """Initialize file validator.

        Args:
            must_exist: Whether file must exist
            must_be_file: Whether path must be a file (not directory)
            extensions: Allowed file extensions (e.g., [".md", ".txt"])
        """
        self.must_exist = must_exist
        self.must_be_file = must_be_file
        self.extensions = extensions

    def validate(self, value: str | Path) -> Path:
        """Validate file path.

        Args:
            value: File path to validate

        Returns:
            Validated Path object

        Raises:
            ValidationError: If validation fails
        """
        path = Path(value).expanduser().resolve()

        if self.must_exist and not path.exists():
            raise ValidationError(f"File does not exist: {path}")

        if self.must_be_file and path.exists() and not path.is_file():
            raise ValidationError(f"Path is not a file: {path}")

        if self.extensions and path.suffix.lower() not in self.extensions:
            raise ValidationError(
                f"Invalid file extension: {path.suffix}. "
                f"Expected one of: {', '.join(self.extensions)}"
            )

        return path


class ScreenplayFileValidator(FileValidator):
    """Validator for screenplay text files."""

    def __init__(self) -> None:
        """Initialize screenplay file validator."""
        super().__init__(
            must_exist=True,
            must_be_file=True,
            extensions=SCREENPLAY_EXTENSIONS,
        )


class ConfigFileValidator(FileValidator):
    """Validator specifically for configuration files."""

    def __init__(self) -> None:
        """Initialize config file validator."""
        super().__init__(
            must_exist=True,
            must_be_file=True,
            extensions=[".yaml", ".yml", ".json", ".toml"],
        )
