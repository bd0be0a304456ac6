"""Tests for scene heading and act header recognition."""

import pytest

from scriptshot.parser.headings import (
    clean_location,
    is_act_header,
    is_scene_heading,
    match_act_header,
    normalize_time_period,
    parse_scene_heading,
    roman_to_int,
)


class TestParseSceneHeading:
    """Test parse_scene_heading."""

    def test_basic_heading(self):
        """Test a conventional slugline."""
        heading = parse_scene_heading("INT. COFFEE SHOP - DAY")

        assert heading is not None
        assert heading.time_of_day == "INT"
        assert heading.location == "COFFEE SHOP"
        assert heading.time_period == "DAY"
        assert heading.raw == "INT. COFFEE SHOP - DAY"

    @pytest.mark.parametrize("separator", [" - ", " – ", " — ", "–", "—"])
    def test_dash_glyphs(self, separator):
        """Test that every dash glyph separates location and time."""
        heading = parse_scene_heading(f"EXT. ROOFTOP{separator}NIGHT")

        assert heading is not None
        assert heading.location == "ROOFTOP"
        assert heading.time_period == "NIGHT"

    def test_bare_hyphen_separator(self):
        """Test that an unspaced hyphen works when it is the only separator."""
        heading = parse_scene_heading("INT. OFFICE-DAY")

        assert heading is not None
        assert heading.location == "OFFICE"

    def test_hyphenated_location_kept(self):
        """Test that hyphens inside a location survive a spaced separator."""
        heading = parse_scene_heading("INT. SEMI-DETACHED HOUSE - NIGHT")

        assert heading is not None
        assert heading.location == "SEMI-DETACHED HOUSE"

    def test_markdown_marker(self):
        """Test headings written as markdown headings."""
        heading = parse_scene_heading("## EXT. PARK - DAY")

        assert heading is not None
        assert heading.location == "PARK"

    def test_trailing_annotation(self):
        """Test that a trailing parenthetical is dropped."""
        heading = parse_scene_heading("INT. OFFICE - NIGHT (SCENE 12)")

        assert heading is not None
        assert heading.time_period == "NIGHT"

    @pytest.mark.parametrize(
        "line",
        [
            "INT OFFICE - DAY",
            "INTERIOR. OFFICE - DAY",
            "INT. OFFICE",
            "INT. - DAY",
            "INT. OFFICE - ",
            "The INT. OFFICE - DAY",
            "EXTRA. OFFICE - DAY",
            "",
        ],
    )
    def test_not_headings(self, line):
        """Test lines that must not be recognized as headings."""
        assert parse_scene_heading(line) is None
        assert not is_scene_heading(line)

    @pytest.mark.parametrize(
        ("prefix", "expected"),
        [("INT.", "INT"), ("EXT.", "EXT"), ("INT/EXT.", "INT/EXT"), ("INT./EXT.", "INT/EXT")],
    )
    def test_prefixes(self, prefix, expected):
        """Test the recognized setting prefixes."""
        heading = parse_scene_heading(f"{prefix} CAR - DAY")

        assert heading is not None
        assert heading.time_of_day == expected


class TestNormalizeTimePeriod:
    """Test normalize_time_period."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("NIGHT", "NIGHT"),
            ("night", "NIGHT"),
            ("LATE NIGHT", "NIGHT"),
            ("DAWN", "DAWN"),
            ("DUSK", "DUSK"),
            ("CONTINUOUS", "CONTINUOUS"),
            ("DAY", "DAY"),
            ("MORNING", "DAY"),
            ("LATER", "DAY"),
            ("MOMENTS LATER", "DAY"),
        ],
    )
    def test_vocabulary(self, token, expected):
        """Test mapping onto the five known periods."""
        assert normalize_time_period(token) == expected


class TestCleanLocation:
    """Test clean_location."""

    @pytest.mark.parametrize(
        ("fragment", "expected"),
        [
            ('"THE HIDEOUT"', "THE HIDEOUT"),
            ("“THE HIDEOUT”", "THE HIDEOUT"),
            ("'THE HIDEOUT'", "THE HIDEOUT"),
            ("sol's heart", "SOL'S HEART"),
            ("  kitchen  ", "KITCHEN"),
        ],
    )
    def test_clean(self, fragment, expected):
        """Test quote removal and uppercasing."""
        assert clean_location(fragment) == expected


class TestActHeaders:
    """Test act header matching."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("### ACT I – SETUP", (1, "SETUP")),
            ("## ACT II - CONFRONTATION", (2, "CONFRONTATION")),
            ("# ACT III — RESOLUTION", (3, "RESOLUTION")),
            ("##ACT IV-CLIMAX", (4, "CLIMAX")),
            ("## act v – the end", (5, "the end")),
        ],
    )
    def test_match(self, line, expected):
        """Test recognized act headers."""
        assert match_act_header(line) == expected
        assert is_act_header(line)

    @pytest.mark.parametrize(
        "line",
        [
            "## ACT VI – EPILOGUE",
            "## ACT I",
            "Act I begins here.",
            "## ACT 1 – SETUP",
            "## ACT I –",
            "ACT I – SETUP",
            "Act I - Setup: Sarah discovers the letter.",
            "#### ACT I – SETUP",
        ],
    )
    def test_no_match(self, line):
        """Test lines that are not act headers."""
        assert match_act_header(line) is None
        assert not is_act_header(line)

    @pytest.mark.parametrize(
        ("numeral", "value"), [("I", 1), ("ii", 2), ("III", 3), ("IV", 4), ("V", 5)]
    )
    def test_roman_to_int(self, numeral, value):
        """Test numeral decoding."""
        assert roman_to_int(numeral) == value
