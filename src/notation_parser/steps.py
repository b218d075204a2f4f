"""Step parser: one atomic fragment (no ``x``, no ``+``) into a Step.

Also holds the combined-step splitter: sheets routinely glue a run and
its recovery together (``400 TL Rec.1'30"``), which has to become two
steps rather than one malformed one.
"""

from __future__ import annotations

import re

from notation_parser.models.enums import IntensityType, StepKind
from notation_parser.models.workout import Intensity, Step
from notation_parser.tokens import (
    MINUTE_MARKS,
    SECOND_MARKS,
    extract_intensity,
    find_distance,
    has_duration,
    parse_duration,
)

_PAUSE_PREFIX_RE = re.compile(r"^PL\.?\s*(?=\d)", re.IGNORECASE)
_RECOVERY_PREFIX_RE = re.compile(r"^(?:rest|rec)\.?", re.IGNORECASE)

_DURATION_TEXT = rf"\d+\s*[{MINUTE_MARKS}]?\s*\d*\s*[{SECOND_MARKS}]?"
_COMBINED_RE = re.compile(
    r"^(\d+(?:[.,]\d+)?\s*(?:km|m(?!in))?)"   # distance, unit optional
    r"\s*([A-Z]{2})"                          # intensity code
    rf"\s+(Rec\.?\s*{_DURATION_TEXT})",       # recovery
    re.IGNORECASE,
)


def parse_step(fragment: str) -> Step | None:
    """Interpret a single fragment, or return None to drop it.

    Priority:
        1. ``PL`` + duration: pause in place (rest).
        2. ``Rec`` / ``rest`` + duration: rest; without a duration the
           fragment is dropped.
        3. A distance: run step, with the intensity code if any.
        4. A duration: rest if the code is PL, otherwise run.
        5. Anything else is dropped.
    """
    text = fragment.strip()
    if not text:
        return None

    pause = _PAUSE_PREFIX_RE.match(text)
    if pause and has_duration(text[pause.end():]):
        return Step(
            kind=StepKind.REST,
            duration_seconds=parse_duration(text[pause.end():]),
        )

    recovery = _RECOVERY_PREFIX_RE.match(text)
    if recovery:
        remainder = text[recovery.end():]
        if not has_duration(remainder):
            return None
        return Step(kind=StepKind.REST, duration_seconds=parse_duration(remainder))

    distance = find_distance(text)
    if distance is not None:
        return Step(
            kind=StepKind.RUN,
            distance_meters=distance,
            intensity=Intensity.of(extract_intensity(text)),
        )

    if has_duration(text):
        code = extract_intensity(text)
        return Step(
            kind=StepKind.REST if code == IntensityType.PL else StepKind.RUN,
            duration_seconds=parse_duration(text),
            intensity=Intensity.of(code),
        )

    return None


def split_combined_step(fragment: str) -> list[str]:
    """Split ``<distance> <code> Rec.<duration>`` into run and recovery parts.

    Returns the fragment unchanged (as a one-item list) when it does not
    have that shape.
    """
    text = fragment.strip()
    match = _COMBINED_RE.match(text)
    if not match:
        return [text]
    distance, code, recovery = match.groups()
    return [f"{distance.strip()} {code}", recovery]


def parse_steps(fragment: str) -> list[Step]:
    """Run the splitter and parse each part, dropping unparseable ones."""
    steps: list[Step] = []
    for part in split_combined_step(fragment):
        step = parse_step(part)
        if step is not None:
            steps.append(step)
    return steps
