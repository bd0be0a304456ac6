"""Screenplay text parser: raw AI-authored text to a structured Screenplay."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from scriptshot.config import get_logger
from scriptshot.exceptions import ParseError, ScriptShotFileNotFoundError
from scriptshot.parser.action import extract_actions, extract_description
from scriptshot.parser.acts import extract_acts
from scriptshot.parser.dialogue import extract_dialogue
from scriptshot.parser.duration import estimate_duration
from scriptshot.parser.headings import parse_scene_heading
from scriptshot.parser.lines import (
    ClassifiedLine,
    LineKind,
    classify_lines,
    split_lines,
)
from scriptshot.parser.models import Scene, Screenplay

logger = get_logger(__name__)


def scene_ranges(lines: Sequence[ClassifiedLine]) -> list[tuple[int, int]]:
    """Compute ``(start, end)`` ranges, one per scene heading.

    ``start`` is the heading's index and ``end`` is exclusive: the next
    heading or the end of the document. Lines before the first heading
    belong to no scene.
    """
    starts = [line.index for line in lines if line.kind is LineKind.SCENE_HEADING]
    if not starts:
        return []
    ends = [*starts[1:], len(lines)]
    return list(zip(starts, ends, strict=True))


def build_scene(
    lines: Sequence[ClassifiedLine],
    start: int,
    end: int,
    scene_number: int,
    excluded: frozenset[int] = frozenset(),
) -> Scene:
    """Build one scene from its heading at ``start`` and body up to ``end``.

    Args:
        lines: The shared classified line buffer.
        start: Index of the scene heading.
        end: Exclusive end index of the scene body.
        scene_number: 1-based position of the scene.
        excluded: Line indices claimed elsewhere (act descriptions).

    Returns:
        The assembled scene.
    """
    heading = parse_scene_heading(lines[start].text)
    if heading is None:  # pragma: no cover - ranges start at classified headings
        raise ValueError(f"Line {start} is not a scene heading")

    body = [line for line in lines[start + 1 : end] if line.index not in excluded]

    dialogue, characters = extract_dialogue(body)
    action = extract_actions(body, characters)

    return Scene(
        scene_id=f"scene_{scene_number}",
        scene_number=scene_number,
        time_of_day=heading.time_of_day,
        location=heading.location,
        time_period=heading.time_period,
        description=extract_description(body),
        action=action,
        dialogue=dialogue,
        characters=characters,
        duration_estimate=estimate_duration(dialogue, len(action)),
    )


def parse_screenplay_text(text: Any) -> Screenplay | None:
    """Parse screenplay text into a structured screenplay.

    This is a pure function of its input: it reads no settings, logs nothing
    and keeps no state between calls.

    Args:
        text: The raw screenplay text. ``None`` and non-string values are
            accepted and treated as empty.

    Returns:
        The structured screenplay, or None when the input is empty, blank or
        contains no recognizable scene heading.
    """
    if not isinstance(text, str) or not text.strip():
        return None

    lines = classify_lines(split_lines(text))
    acts, act_description_lines = extract_acts(lines)

    scenes = [
        build_scene(lines, start, end, number, act_description_lines)
        for number, (start, end) in enumerate(scene_ranges(lines), start=1)
    ]

    if not scenes:
        return None

    return Screenplay(acts=acts, scenes=tuple(scenes))


class ScreenplayParser:
    """Parse screenplay text and files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the parser.

        Args:
            encoding: Text encoding used by ``parse_file``.
        """
        self.encoding = encoding

    def parse(self, content: str | None) -> Screenplay | None:
        """Parse screenplay content.

        Args:
            content: Raw screenplay text

        Returns:
            Parsed Screenplay, or None when nothing usable was found
        """
        screenplay = parse_screenplay_text(content)
        logger.debug(
            "Parsed screenplay text",
            scene_count=0 if screenplay is None else len(screenplay.scenes),
            act_count=0 if screenplay is None else len(screenplay.acts),
        )
        return screenplay

    def parse_file(self, file_path: Path) -> Screenplay | None:
        """Parse a screenplay file.

        Args:
            file_path: Path to the screenplay text file

        Returns:
            Parsed Screenplay, or None when nothing usable was found

        Raises:
            ScriptShotFileNotFoundError: If the file does not exist
            ParseError: If the file cannot be read or decoded
        """
        if not file_path.is_file():
            raise ScriptShotFileNotFoundError(
                message=f"Screenplay file not found: {file_path}",
                hint="Check the path and try again.",
                details={"file": str(file_path)},
            )

        logger.debug(f"Parsing screenplay file: {file_path}")
        try:
            content = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read screenplay file: {e}")
            raise ParseError(
                message=f"Failed to read screenplay file: {file_path}",
                hint=f"Make sure the file is {self.encoding} encoded text.",
                details={"file": str(file_path), "reader_error": str(e)},
            ) from e

        screenplay = self.parse(content)
        if screenplay is None:
            logger.warning("No scenes found in screenplay file", file=str(file_path))
        else:
            logger.info(
                "Parsed screenplay file",
                file=str(file_path),
                scenes=len(screenplay.scenes),
                acts=len(screenplay.acts),
            )
        return screenplay
