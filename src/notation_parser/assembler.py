"""Top-level workout assembler.

Splits the notation on ``+`` and classifies each section by position and
shape:

    2km TS + 4 x 400 TL Rec.1'30" + 2 x (3 x 500TL Rec.1'30") PL.1'30" + 2km TS
    ^warmup  ^block                  ^block (nested)                    ^cooldown

Parsing is lenient: sections that match nothing are dropped and the
function never raises on malformed notation.
"""

from __future__ import annotations

from dataclasses import replace

from notation_parser.models.enums import DEFAULT_BOUNDARY_INTENSITY, IntensityType, StepKind
from notation_parser.models.workout import Intensity, ParsedWorkout, Step, WorkoutItem
from notation_parser.scanner import (
    REPETITION_HEADER_RE,
    parse_repetition_block,
    strip_wrapping_parens,
)
from notation_parser.steps import parse_step
from notation_parser.tokens import extract_intensity, leading_distance

SECTION_SEPARATOR = "+"


def _boundary_step(kind: StepKind) -> Step:
    return Step(
        kind=kind,
        intensity=Intensity(DEFAULT_BOUNDARY_INTENSITY),
        mark_lap=True,
    )


def parse_workout(
    text: str,
    name: str | None = None,
    date: str | None = None,
) -> ParsedWorkout:
    """Parse workout notation into a ParsedWorkout tree.

    Args:
        text: The shorthand notation. Surrounding whitespace is ignored;
            an empty string gives an empty workout.
        name: Opaque label stored on the result.
        date: Opaque date string stored on the result.

    Returns:
        A frozen ParsedWorkout. Warmup and cooldown always exist and
        default to intensity TS.
    """
    sections = [section.strip() for section in text.strip().split(SECTION_SEPARATOR)]
    last_index = len(sections) - 1

    warmup = _boundary_step(StepKind.WARMUP)
    cooldown = _boundary_step(StepKind.COOLDOWN)
    items: list[WorkoutItem] = []

    for index, section in enumerate(sections):
        unwrapped = strip_wrapping_parens(section)
        if REPETITION_HEADER_RE.match(unwrapped):
            block = parse_repetition_block(unwrapped)
            if block is not None:
                items.append(block)
                continue

        distance = leading_distance(section)
        if distance is not None:
            code = extract_intensity(section)
            # Position decides the role; index 0 wins for a lone section.
            if index == 0:
                warmup = _with_distance(warmup, distance, code)
            elif index == last_index:
                cooldown = _with_distance(cooldown, distance, code)
            else:
                items.append(Step(
                    kind=StepKind.RUN,
                    distance_meters=distance,
                    intensity=Intensity.of(code),
                ))
            continue

        step = parse_step(section)
        if step is not None:
            items.append(step)

    return ParsedWorkout(
        warmup=warmup,
        cooldown=cooldown,
        items=tuple(items),
        name=name,
        date=date,
    )


def _with_distance(step: Step, distance: float, code: IntensityType | None) -> Step:
    """Attach a distance, replacing the intensity only when one was found."""
    intensity = Intensity.of(code) or step.intensity
    return replace(step, distance_meters=distance, intensity=intensity)
