"""Action beat and scene description extraction."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from scriptshot.parser.lines import ClassifiedLine, LineKind
from scriptshot.parser.models import DEFAULT_SCENE_DESCRIPTION, MAX_DESCRIPTION_LENGTH

# Prose lines in this length window that name a speaker count as stage directions
STAGE_DIRECTION_MIN_LENGTH = 11
STAGE_DIRECTION_MAX_LENGTH = 199


def _mentions_character(text: str, characters: Iterable[str]) -> bool:
    return any(
        re.search(rf"\b{re.escape(name)}\b", text, re.IGNORECASE)
        for name in characters
    )


def extract_actions(
    lines: Iterable[ClassifiedLine],
    characters: Sequence[str] = (),
) -> tuple[str, ...]:
    """Collect the action beats of a scene in document order.

    Italic ``*beat*`` lines are always beats. Plain prose lines that mention
    one of the scene's speakers by name are kept as beats too. Nothing that
    contains ``CUT TO`` becomes a beat.

    Args:
        lines: Classified lines of one scene body.
        characters: Speaker names found in the scene's dialogue.

    Returns:
        The action beats.
    """
    actions: list[str] = []
    for line in lines:
        if line.is_transition:
            continue
        if line.kind is LineKind.ACTION:
            if line.text:
                actions.append(line.text)
        elif (
            line.kind is LineKind.PROSE
            and characters
            and STAGE_DIRECTION_MIN_LENGTH <= len(line.text) <= STAGE_DIRECTION_MAX_LENGTH
            and _mentions_character(line.text, characters)
        ):
            actions.append(line.text)
    return tuple(actions)


def extract_description(lines: Iterable[ClassifiedLine]) -> str:
    """Build the scene description from the prose before the first dialogue.

    Prose lines are joined with single spaces. Collection stops for good at
    the first dialogue line, bare ``**NAME**`` speaker line or ``CUT TO``
    transition. Metadata, act headers, action beats and parentheticals are
    skipped. The result is capped at ``MAX_DESCRIPTION_LENGTH`` characters.

    Returns:
        The description, or ``DEFAULT_SCENE_DESCRIPTION`` when no prose exists.
    """
    parts: list[str] = []
    for line in lines:
        if line.is_dialogue or line.is_transition or line.speaker is not None:
            break
        if line.kind is LineKind.PROSE:
            parts.append(line.text)

    description = " ".join(parts)[:MAX_DESCRIPTION_LENGTH].strip()
    return description or DEFAULT_SCENE_DESCRIPTION
