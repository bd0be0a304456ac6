"""Line normalisation and classification.

Every input line is classified exactly once into a ``LineKind``; the act,
dialogue and action/description extractors work over the resulting tuple
instead of re-inspecting raw strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from scriptshot.parser.headings import is_act_header, is_scene_heading

MARKDOWN_HEADING_MARKER = re.compile(r"^#{1,3}\s*")
LINE_BREAK = re.compile(r"\r\n|\r|\n")

DIALOGUE_MARKER_PATTERN = re.compile(r"^\*\*(?P<name>[^*]+)\*\*")
LEGACY_SPEAKER_PATTERN = re.compile(r"^\*\*(?P<name>[^*]+)\*\*$")
ACTION_PATTERN = re.compile(r"^\*(?!\*)(?P<text>.*?)(?<!\*)\*$")
PARENTHETICAL_PATTERN = re.compile(r"^\([^)]+\)$")

METADATA_PREFIXES = ("#", "**", "---")
INLINE_ACT_MENTION = re.compile(r"\bact\s+(?:iv|v|i{1,3})\b", re.IGNORECASE)
PLANNING_SECTION = re.compile(
    r"^(?:episode\s+structure|character\s+arcs|visual)\b", re.IGNORECASE
)
TRANSITION_MARKER = "CUT TO"


class LineKind(str, Enum):
    """Syntactic kind of a screenplay line."""

    BLANK = "blank"
    META_NOISE = "meta_noise"
    ACT_HEADER = "act_header"
    SCENE_HEADING = "scene_heading"
    DIALOGUE_MARKER = "dialogue_marker"
    DIALOGUE_CONTINUATION = "dialogue_continuation"
    ACTION = "action"
    PARENTHETICAL = "parenthetical"
    PROSE = "prose"


@dataclass(frozen=True)
class ClassifiedLine:
    """A trimmed input line tagged with its kind.

    ``text`` holds the payload: the speaker name for dialogue markers, the
    spoken text for continuations, the beat without asterisks for actions and
    the trimmed line otherwise. ``quoted`` is set for ``>``-prefixed lines and
    ``speaker`` for legacy ``**NAME**`` lines.
    """

    index: int
    kind: LineKind
    text: str
    raw: str
    quoted: bool = False
    speaker: str | None = None

    @property
    def is_transition(self) -> bool:
        """True for ``CUT TO`` transition lines."""
        return TRANSITION_MARKER in self.raw

    @property
    def is_dialogue(self) -> bool:
        """True for any line that belongs to a ``>`` dialogue block."""
        return self.quoted or self.kind is LineKind.DIALOGUE_MARKER


def split_lines(text: str) -> list[str]:
    """Split text on any line break convention."""
    return LINE_BREAK.split(text)


def normalize_line(line: str) -> str:
    """Trim a line and drop a markdown marker in front of a scene heading.

    Act headers keep their ``#`` marker since it is part of the header
    syntax. Any other ``#`` line keeps it too and reads as metadata.
    """
    stripped = line.strip()
    marker = MARKDOWN_HEADING_MARKER.match(stripped)
    if marker:
        rest = stripped[marker.end() :]
        if is_scene_heading(rest):
            return rest
    return stripped


def is_metadata(line: str) -> bool:
    """Return True for markdown/planning noise that carries no scene content."""
    return (
        line.startswith(METADATA_PREFIXES)
        or INLINE_ACT_MENTION.search(line) is not None
        or PLANNING_SECTION.match(line) is not None
    )


def _classify_quoted(index: int, line: str) -> ClassifiedLine:
    content = line[1:].strip()
    marker = DIALOGUE_MARKER_PATTERN.match(content)
    if marker and marker.group("name").strip():
        return ClassifiedLine(
            index,
            LineKind.DIALOGUE_MARKER,
            marker.group("name").strip(),
            line,
            quoted=True,
        )
    if PARENTHETICAL_PATTERN.match(content):
        return ClassifiedLine(index, LineKind.PARENTHETICAL, content, line, quoted=True)
    return ClassifiedLine(
        index, LineKind.DIALOGUE_CONTINUATION, content, line, quoted=True
    )


def classify_line(index: int, line: str) -> ClassifiedLine:
    """Classify one normalised line.

    Args:
        index: Position of the line in the document.
        line: The line after ``normalize_line``.

    Returns:
        The tagged line.
    """
    if not line:
        return ClassifiedLine(index, LineKind.BLANK, "", line)
    if is_act_header(line):
        return ClassifiedLine(index, LineKind.ACT_HEADER, line, line)
    if is_scene_heading(line):
        return ClassifiedLine(index, LineKind.SCENE_HEADING, line, line)
    if line.startswith(">"):
        return _classify_quoted(index, line)
    if is_metadata(line):
        legacy = LEGACY_SPEAKER_PATTERN.match(line)
        speaker = legacy.group("name").strip() if legacy else None
        return ClassifiedLine(
            index, LineKind.META_NOISE, line, line, speaker=speaker or None
        )

    action = ACTION_PATTERN.match(line)
    if action and len(line) > 2:
        return ClassifiedLine(
            index, LineKind.ACTION, action.group("text").strip(), line
        )
    if PARENTHETICAL_PATTERN.match(line):
        return ClassifiedLine(index, LineKind.PARENTHETICAL, line, line)
    return ClassifiedLine(index, LineKind.PROSE, line, line)


def classify_lines(lines: Iterable[str]) -> tuple[ClassifiedLine, ...]:
    """Normalise and classify every line of a document."""
    return tuple(
        classify_line(index, normalize_line(line)) for index, line in enumerate(lines)
    )
