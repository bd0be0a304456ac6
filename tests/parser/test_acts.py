"""Tests for act extraction."""

from scriptshot.parser.acts import extract_acts
from scriptshot.parser.lines import classify_lines, split_lines
from scriptshot.parser.models import Act


def acts_of(text: str):
    return extract_acts(classify_lines(split_lines(text)))


class TestExtractActs:
    """Test extract_acts."""

    def test_description_from_next_prose_line(self):
        """Test that the first non-blank prose line describes the act."""
        acts, consumed = acts_of("## ACT I – SETUP\n\n\nIn the beginning, we meet our hero.")

        assert acts == (
            Act(act_number=1, title="SETUP", description="In the beginning, we meet our hero."),
        )
        assert consumed == frozenset({3})

    def test_heading_after_header_is_not_description(self):
        """Test that a scene heading right after an act header is left alone."""
        acts, consumed = acts_of("## ACT II – MIDPOINT\nINT. OFFICE - DAY\nProse.")

        assert acts[0].description == ""
        assert consumed == frozenset()

    def test_action_after_header_is_not_description(self):
        """Test that only plain prose can describe an act."""
        acts, _ = acts_of("## ACT II – MIDPOINT\n*A beat.*")

        assert acts[0].description == ""

    def test_header_at_end_of_document(self):
        """Test an act header on the last line."""
        acts, consumed = acts_of("INT. OFFICE - DAY\n\nProse.\n\n## ACT V – FINALE")

        assert acts == (Act(act_number=5, title="FINALE"),)
        assert consumed == frozenset()

    def test_acts_in_document_order(self):
        """Test that acts are listed as they appear, not sorted."""
        acts, _ = acts_of("## ACT III – C\n\n## ACT I – A\n\n## ACT II – B")

        assert [act.act_number for act in acts] == [3, 1, 2]

    def test_no_acts(self):
        """Test a document without act headers."""
        assert acts_of("INT. OFFICE - DAY\n\nProse.") == ((), frozenset())

    def test_header_requires_markdown_marker(self):
        """Test that an outline line naming an act is noise, not a header."""
        acts, consumed = acts_of(
            "**Episode Structure**\n"
            "Act I - Setup: Sarah discovers the letter.\n"
            "ACT II – CONFRONTATION\n"
            "Sarah confronts her brother."
        )

        assert acts == ()
        assert consumed == frozenset()
