"""Tests for the ScriptShot exception hierarchy."""

import pytest

from scriptshot.exceptions import (
    ConfigurationError,
    ParseError,
    ScriptShotError,
    ScriptShotFileNotFoundError,
    check_config_keys,
)


class TestScriptShotError:
    """Test error formatting."""

    def test_message_only(self):
        """Test an error without hint or details."""
        error = ScriptShotError("Something broke")

        assert str(error) == "Error: Something broke"
        assert error.hint is None
        assert error.details is None

    def test_hint_and_details(self):
        """Test the full formatted message."""
        error = ScriptShotError(
            "Failed to read screenplay file",
            hint="Check the encoding.",
            details={"file": "a.md", "encoding": "utf-8"},
        )

        assert str(error) == (
            "Error: Failed to read screenplay file\n"
            "Hint: Check the encoding.\n"
            "Details:\n"
            "  file: a.md\n"
            "  encoding: utf-8"
        )

    @pytest.mark.parametrize(
        "error_class",
        [ConfigurationError, ParseError, ScriptShotFileNotFoundError],
    )
    def test_subclasses(self, error_class):
        """Test that every error is a ScriptShotError."""
        error = error_class("oops", hint="fix it")

        assert isinstance(error, ScriptShotError)
        assert error.format_error() == "Error: oops\nHint: fix it"


class TestCheckConfigKeys:
    """Test check_config_keys."""

    @pytest.mark.parametrize(
        ("wrong", "correct"),
        [
            ("level", "log_level"),
            ("format", "log_format"),
            ("indent", "output_indent"),
            ("encoding", "input_encoding"),
        ],
    )
    def test_wrong_keys(self, wrong, correct):
        """Test hints for common key mistakes."""
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: "x"})

        assert exc_info.value.details["correct_key"] == correct
        assert correct in exc_info.value.hint

    def test_valid_keys(self):
        """Test that correct keys pass."""
        check_config_keys({"log_level": "INFO", "output_indent": 2})
