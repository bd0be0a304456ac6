"""Dialogue block extraction as an explicit two-state machine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from scriptshot.parser.lines import ClassifiedLine, LineKind
from scriptshot.parser.models import DialogueEntry


@dataclass(frozen=True)
class Idle:
    """No character turn is open."""


@dataclass
class InTurn:
    """A character turn is open and collecting spoken lines."""

    character: str
    lines: list[str] = field(default_factory=list)


DialogueState = Idle | InTurn


class DialogueStateMachine:
    """Group ``>`` dialogue lines of one scene into per-character turns.

    Transitions:
        * a ``> **NAME**`` marker (or a legacy ``**NAME**`` line) closes any
          open turn and opens a turn for NAME;
        * a ``>`` continuation appends to the open turn, and is dropped when
          idle;
        * a ``>`` parenthetical is discarded without closing the turn;
        * blank lines are ignored;
        * any other line closes the open turn.

    A closed turn becomes a ``DialogueEntry`` only if it captured at least one
    line. Consecutive turns by the same character are kept separate.
    """

    def __init__(self) -> None:
        """Start idle with no entries."""
        self.state: DialogueState = Idle()
        self.entries: list[DialogueEntry] = []

    def _close_turn(self) -> None:
        if isinstance(self.state, InTurn) and self.state.lines:
            self.entries.append(
                DialogueEntry(
                    character=self.state.character, lines=tuple(self.state.lines)
                )
            )
        self.state = Idle()

    def feed(self, line: ClassifiedLine) -> None:
        """Advance the machine by one line."""
        if line.kind is LineKind.BLANK:
            return
        if line.kind is LineKind.DIALOGUE_MARKER:
            self._close_turn()
            self.state = InTurn(character=line.text)
            return
        if line.kind is LineKind.META_NOISE and line.speaker:
            self._close_turn()
            self.state = InTurn(character=line.speaker)
            return
        if line.kind is LineKind.DIALOGUE_CONTINUATION:
            if isinstance(self.state, InTurn) and line.text:
                self.state.lines.append(line.text)
            return
        if line.kind is LineKind.PARENTHETICAL and line.quoted:
            return
        self._close_turn()

    def flush(self) -> tuple[DialogueEntry, ...]:
        """Close any open turn and return all entries."""
        self._close_turn()
        return tuple(self.entries)


def unique_characters(entries: Iterable[DialogueEntry]) -> tuple[str, ...]:
    """Speaker names in order of first appearance, without duplicates."""
    seen: dict[str, None] = {}
    for entry in entries:
        seen.setdefault(entry.character, None)
    return tuple(seen)


def extract_dialogue(
    lines: Iterable[ClassifiedLine],
) -> tuple[tuple[DialogueEntry, ...], tuple[str, ...]]:
    """Extract dialogue turns and the speaking characters of a scene.

    Args:
        lines: The classified lines of one scene body.

    Returns:
        Tuple of (dialogue entries, unique character names).
    """
    machine = DialogueStateMachine()
    for line in lines:
        machine.feed(line)
    entries = machine.flush()
    return entries, unique_characters(entries)
