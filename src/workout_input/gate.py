"""Input gate between the application's workout form and the parser.

The parser itself accepts anything; this layer enforces what the form
requires before calling it: some text must be present, and untrusted
text is bounded in length and parenthesis depth so recursion stays
shallow.
"""

from __future__ import annotations

import logging

from notation_parser import ParsedWorkout, parse_workout
from notation_parser.models.enums import INTENSITY_LABELS

from workout_input import config
from workout_input.exceptions import (
    EmptyWorkoutError,
    WorkoutTooDeepError,
    WorkoutTooLongError,
)

logger = logging.getLogger(__name__)

EXAMPLE_WORKOUT = (
    "2km TS + 4 x 400 TL Rec.1'30\" + 5 x 600 TL Rec.1'30\" "
    "+ 2 x 1km TR Rec. 3' + 1km TS"
)


def nesting_depth(text: str) -> int:
    """Maximum parenthesis depth in *text*; stray ``)`` are ignored."""
    depth = 0
    deepest = 0
    for char in text:
        if char == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif char == ")" and depth > 0:
            depth -= 1
    return deepest


def submit_workout(
    text: str,
    name: str | None = None,
    date: str | None = None,
    *,
    max_length: int | None = None,
    max_nesting: int | None = None,
) -> ParsedWorkout:
    """Validate form input and parse it.

    Empty ``name`` / ``date`` are treated as not supplied; anything else
    is passed through verbatim.

    Raises:
        EmptyWorkoutError: *text* is empty or whitespace-only.
        WorkoutTooLongError: *text* is longer than the length limit.
        WorkoutTooDeepError: parentheses nest deeper than the limit.
    """
    limit_length = config.MAX_LENGTH if max_length is None else max_length
    limit_nesting = config.MAX_NESTING if max_nesting is None else max_nesting

    stripped = text.strip() if text else ""
    if not stripped:
        raise EmptyWorkoutError()
    if len(stripped) > limit_length:
        raise WorkoutTooLongError(len(stripped), limit_length)
    depth = nesting_depth(stripped)
    if depth > limit_nesting:
        raise WorkoutTooDeepError(depth, limit_nesting)

    workout = parse_workout(
        stripped,
        name=name or None,
        date=date or None,
    )
    logger.info(
        "Parsed workout %r: %d top-level items",
        workout.name or "<unnamed>",
        len(workout.items),
    )
    return workout


def intensity_references() -> list[tuple[str, str]]:
    """(code, label) pairs in display order for the reference panel."""
    return [(code.value, label) for code, label in INTENSITY_LABELS.items()]
