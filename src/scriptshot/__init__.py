"""ScriptShot: structure AI-authored screenplay text for video generation.

ScriptShot turns loosely formatted screenplay text (markdown sluglines,
``> **NAME**`` dialogue blocks, italic action beats, act headers) into a
strict document of acts and scenes with dialogue, characters and duration
estimates.
"""

from .config import ScriptShotSettings, get_logger, get_settings
from .exceptions import ParseError, ScriptShotError
from .parser import (
    Act,
    DialogueEntry,
    Scene,
    ScreenplayParser,
    Screenplay,
    parse_screenplay_text,
)

__version__ = "0.1.0"

__all__ = [
    "Act",
    "DialogueEntry",
    "ParseError",
    "Scene",
    "ScreenplayParser",
    "Screenplay",
    "ScriptShotError",
    "ScriptShotSettings",
    "__version__",
    "get_logger",
    "get_settings",
    "parse_screenplay_text",
]
