"""Per-scene duration estimate in seconds."""

from __future__ import annotations

from collections.abc import Iterable

from scriptshot.parser.models import MAX_DURATION, MIN_DURATION, DialogueEntry


def estimate_duration(dialogue: Iterable[DialogueEntry], action_count: int) -> int:
    """Estimate a scene's duration from its content volume.

    One second per spoken line and per action beat, clamped to
    ``[MIN_DURATION, MAX_DURATION]``. Never decreases as content grows.
    """
    volume = sum(len(entry.lines) for entry in dialogue) + max(action_count, 0)
    return max(MIN_DURATION, min(MAX_DURATION, volume))
