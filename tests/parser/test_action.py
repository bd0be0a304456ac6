"""Tests for action beat and description extraction."""

import pytest

from scriptshot.parser.action import extract_actions, extract_description
from scriptshot.parser.lines import classify_lines


class TestExtractActions:
    """Test extract_actions."""

    def test_italic_beats_in_order(self):
        """Test that italic lines are collected in document order."""
        lines = classify_lines(["*First beat.*", "Prose.", "*Second beat.*"])

        assert extract_actions(lines) == ("First beat.", "Second beat.")

    def test_transition_beats_skipped(self):
        """Test that italic transitions are dropped."""
        lines = classify_lines(["*CUT TO: The roof*", "*She runs.*"])

        assert extract_actions(lines) == ("She runs.",)

    def test_character_mention_is_case_insensitive(self):
        """Test that a speaker named in any case marks a stage direction."""
        lines = classify_lines(["john paces the length of the room."])

        assert extract_actions(lines, ("JOHN",)) == (
            "john paces the length of the room.",
        )

    def test_mention_needs_whole_word(self):
        """Test that a name inside another word is not a mention."""
        lines = classify_lines(["Johnson paces the length of the room."])

        assert extract_actions(lines, ("JOHN",)) == ()

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Ann waits.", False),
            ("Ann waits..", True),
            ("Ann " + "x" * 195, True),
            ("Ann " + "x" * 196, False),
        ],
    )
    def test_stage_direction_length_window(self, text, expected):
        """Test the length bounds on prose stage directions."""
        lines = classify_lines([text])

        assert bool(extract_actions(lines, ("ANN",))) is expected

    def test_prose_transition_with_mention_skipped(self):
        """Test that CUT TO prose is dropped even when it names a speaker."""
        lines = classify_lines(["CUT TO: John at the door, waiting."])

        assert extract_actions(lines, ("JOHN",)) == ()


class TestExtractDescription:
    """Test extract_description."""

    def test_stops_for_good_at_dialogue(self):
        """Test that prose after the first dialogue line is never collected."""
        lines = classify_lines(["Before.", "> **A**", "> Hi.", "After."])

        assert extract_description(lines) == "Before."

    def test_stops_at_bare_quote_line(self):
        """Test that any > line counts as dialogue."""
        lines = classify_lines(["Before.", "> (whispering)", "After."])

        assert extract_description(lines) == "Before."

    def test_stops_at_bare_speaker_line(self):
        """Test that an unquoted **NAME** line ends the description."""
        lines = classify_lines(
            ["Before.", "**Logline:** Skipped.", "**BOB**", "Hello!"]
        )

        assert extract_description(lines) == "Before."

    def test_skips_non_prose(self):
        """Test that metadata, parentheticals and actions are skipped."""
        lines = classify_lines(["# Note", "(beat)", "*A beat.*", "", "Room."])

        assert extract_description(lines) == "Room."

    def test_default(self):
        """Test the placeholder for an empty body."""
        assert extract_description(()) == "Scene description"

    def test_truncation_strips_trailing_space(self):
        """Test that a cut falling on a space leaves no trailing whitespace."""
        lines = classify_lines(["x" * 499, "y"])

        assert extract_description(lines) == "x" * 499
