"""Act list extraction."""

from __future__ import annotations

from collections.abc import Sequence

from scriptshot.parser.headings import match_act_header
from scriptshot.parser.lines import ClassifiedLine, LineKind
from scriptshot.parser.models import Act


def _next_non_blank(
    lines: Sequence[ClassifiedLine], start: int
) -> ClassifiedLine | None:
    for line in lines[start:]:
        if line.kind is not LineKind.BLANK:
            return line
    return None


def extract_acts(
    lines: Sequence[ClassifiedLine],
) -> tuple[tuple[Act, ...], frozenset[int]]:
    """Collect acts in document order.

    Acts form a flat list independent of scene boundaries. The first
    non-blank line after a header becomes the act description when it is
    plain prose.

    Args:
        lines: The classified line buffer for the whole document.

    Returns:
        The acts, plus the indices of lines used as act descriptions so that
        scene extraction can leave them out.
    """
    acts: list[Act] = []
    consumed: set[int] = set()

    for line in lines:
        if line.kind is not LineKind.ACT_HEADER:
            continue
        header = match_act_header(line.text)
        if header is None:  # pragma: no cover - classifier guarantees a match
            continue
        act_number, title = header

        description = ""
        following = _next_non_blank(lines, line.index + 1)
        if following is not None and following.kind is LineKind.PROSE:
            description = following.text
            consumed.add(following.index)

        acts.append(Act(act_number=act_number, title=title, description=description))

    return tuple(acts), frozenset(consumed)
