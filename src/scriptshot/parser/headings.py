"""Scene heading (slugline) recognition and parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from scriptshot.parser.models import TimeOfDay, TimePeriod

# INT./EXT. are both accepted as spellings of the combined INT/EXT prefix
SCENE_HEADING_PATTERN = re.compile(
    r"^(?:#{1,3}\s*)?(INT\.?/EXT|INT|EXT)\.\s*(?P<body>.*)$",
    re.IGNORECASE,
)
TRAILING_ANNOTATION = re.compile(r"\s*\([^)]*\)\s*$")
SPACED_SEPARATOR = re.compile(r"\s*[–—]\s*|\s+-\s+")
BARE_HYPHEN = re.compile(r"\s*-\s*")
QUOTE_CHARS = re.compile(r"[\"“”]")

# Checked in order; anything else (MORNING, LATER, ...) reads as DAY
TIME_PERIOD_VOCABULARY: tuple[TimePeriod, ...] = (
    "NIGHT",
    "DAWN",
    "DUSK",
    "CONTINUOUS",
    "DAY",
)
DEFAULT_TIME_PERIOD: TimePeriod = "DAY"


@dataclass(frozen=True)
class SceneHeading:
    """Components of a recognized scene heading."""

    time_of_day: TimeOfDay
    location: str
    time_period: TimePeriod
    raw: str


def _split_fragments(body: str) -> list[str]:
    """Split a heading body on dash separators.

    Spaced hyphens and en/em dashes separate fragments; a bare hyphen is only
    treated as a separator when the body has no other separator, so hyphenated
    location names survive.
    """
    fragments = [part.strip() for part in SPACED_SEPARATOR.split(body)]
    if len(fragments) < 2:
        fragments = [part.strip() for part in BARE_HYPHEN.split(body)]
    return fragments


def normalize_time_period(token: str) -> TimePeriod:
    """Map a heading's time token onto the known time periods."""
    upper = token.upper()
    for period in TIME_PERIOD_VOCABULARY:
        if period in upper:
            return period
    return DEFAULT_TIME_PERIOD


def clean_location(fragment: str) -> str:
    """Strip quotes from a location fragment and uppercase it."""
    location = QUOTE_CHARS.sub("", fragment).strip()
    if len(location) >= 2 and location[0] == location[-1] == "'":
        location = location[1:-1].strip()
    return location.upper()


def parse_scene_heading(line: str) -> SceneHeading | None:
    """Parse a scene heading line.

    Args:
        line: A single trimmed line, optionally prefixed with a markdown
            heading marker.

    Returns:
        The heading components, or None when the line is not a heading.
        A heading needs the INT/EXT prefix with its period at line start, a
        non-empty location, a dash separator and a time token.
    """
    match = SCENE_HEADING_PATTERN.match(line.strip())
    if not match:
        return None

    body = TRAILING_ANNOTATION.sub("", match.group("body")).strip()
    fragments = _split_fragments(body)
    if len(fragments) < 2:
        return None

    location = clean_location(fragments[0])
    time_token = fragments[-1]
    if not location or not time_token:
        return None

    prefix = match.group(1).upper().replace(".", "")
    time_of_day: TimeOfDay
    if prefix == "INT/EXT":
        time_of_day = "INT/EXT"
    elif prefix == "EXT":
        time_of_day = "EXT"
    else:
        time_of_day = "INT"

    return SceneHeading(
        time_of_day=time_of_day,
        location=location,
        time_period=normalize_time_period(time_token),
        raw=line,
    )


def is_scene_heading(line: str) -> bool:
    """Return True if the line is a recognizable scene heading."""
    return parse_scene_heading(line) is not None


# Act headers

# The markdown marker is required; numerals beyond V are not act headers
ACT_HEADER_PATTERN = re.compile(
    r"^#{1,3}\s*ACT\s+(?P<numeral>IV|V|I{1,3})\s*[-–—]\s*(?P<title>\S.*)$",
    re.IGNORECASE,
)

ROMAN_NUMERALS = {"I": 1, "II": 2, "III": 3, "IV": 4, "V": 5}


def roman_to_int(numeral: str) -> int:
    """Decode a Roman numeral in the range I..V."""
    return ROMAN_NUMERALS[numeral.upper()]


def match_act_header(line: str) -> tuple[int, str] | None:
    """Return (act_number, title) for an act header line, else None."""
    match = ACT_HEADER_PATTERN.match(line.strip())
    if not match:
        return None
    return roman_to_int(match.group("numeral")), match.group("title").strip()


def is_act_header(line: str) -> bool:
    """Return True if the line is an act header."""
    return match_act_header(line) is not None
