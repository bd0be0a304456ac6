"""Screenplay text parser for ScriptShot."""

from __future__ import annotations

from .models import Act, DialogueEntry, Scene, Screenplay
from .screenplay_parser import ScreenplayParser, parse_screenplay_text

__all__ = [
    "Act",
    "DialogueEntry",
    "Scene",
    "ScreenplayParser",
    "Screenplay",
    "parse_screenplay_text",
]
