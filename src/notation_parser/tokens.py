"""Token extractors: distance, duration and intensity code.

Each extractor reads one primitive quantity out of a short text
fragment. Missing quantities come back as zero / None rather than as an
error, so callers test applicability with the ``has_*`` / ``find_*``
helpers before trusting a value.

All functions are pure (no I/O, no module state).
"""

from __future__ import annotations

import re

from notation_parser.models.enums import INTENSITY_SEARCH_ORDER, IntensityType

_NUMBER = r"\d+(?:[.,]\d+)?"

# "2km", "800m", "1,5 km"; "5 min" is not a distance.
DISTANCE_RE = re.compile(rf"({_NUMBER})\s*(km|m(?!in))", re.IGNORECASE)
LEADING_DISTANCE_RE = re.compile(rf"^\s*({_NUMBER})\s*(km|m(?!in))", re.IGNORECASE)

# "400 TL", "500TL", "(400 TL)": a bare integer directly followed by a running code
# is read as meters. PL is a pause and never takes a distance.
RUNNING_CODE = r"(?:TS|TL|TR|CAMINAR|CA|PA|RC)"
BARE_METERS_RE = re.compile(rf"^[\s(]*(\d+)\s*(?={RUNNING_CODE}\b)", re.IGNORECASE)

MINUTE_MARKS = "'‘’′"
SECOND_MARKS = '"“”″'
_MINUTES_RE = re.compile(rf"(\d+)\s*[{MINUTE_MARKS}]")
_SECONDS_RE = re.compile(rf"(\d+)\s*[{SECOND_MARKS}]")


def parse_distance(text: str) -> float:
    """Parse the first ``<number>km`` / ``<number>m`` token into meters.

    A comma decimal separator is accepted (``1,5km`` is 1500 m).
    Returns 0.0 when the text holds no unit-suffixed distance.
    """
    match = DISTANCE_RE.search(text)
    if not match:
        return 0.0
    value = float(match.group(1).replace(",", "."))
    if match.group(2).lower() == "km":
        return value * 1000
    return value


def parse_duration(text: str) -> int:
    """Sum the minutes (``'``) and seconds (``"``) marks into seconds.

    ``1'30"`` is 90, ``2'`` is 120, ``45"`` is 45. Typographic quotes
    and primes count as the straight marks. Returns 0 when neither mark
    is present.
    """
    seconds = 0
    minutes_match = _MINUTES_RE.search(text)
    if minutes_match:
        seconds += int(minutes_match.group(1)) * 60
    seconds_match = _SECONDS_RE.search(text)
    if seconds_match:
        seconds += int(seconds_match.group(1))
    return seconds


def has_duration(text: str) -> bool:
    """True when the text carries a minutes or seconds mark after a number."""
    return bool(_MINUTES_RE.search(text) or _SECONDS_RE.search(text))


def extract_intensity(text: str) -> IntensityType | None:
    """Find the first known intensity code in the text, case-insensitively.

    This is a plain substring search, so only call it on a fragment
    already isolated to a single step.
    """
    upper = text.upper()
    for code, needles in INTENSITY_SEARCH_ORDER:
        if any(needle in upper for needle in needles):
            return code
    return None


def find_distance(text: str) -> float | None:
    """Return the step distance in meters, or None when there is none.

    Accepts a unit-suffixed distance anywhere in the fragment, or a bare
    integer at its start followed by a running intensity code.
    """
    if DISTANCE_RE.search(text):
        return parse_distance(text)
    match = BARE_METERS_RE.match(text)
    if match:
        return float(match.group(1))
    return None


def leading_distance(text: str) -> float | None:
    """Like :func:`find_distance` but the distance must open the text."""
    match = LEADING_DISTANCE_RE.match(text)
    if match:
        return parse_distance(match.group(0))
    match = BARE_METERS_RE.match(text)
    if match:
        return float(match.group(1))
    return None
