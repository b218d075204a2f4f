"""Workout notation parser.

Turns club shorthand such as ``2km TS + 4 x 400 TL Rec.1'30" + 1km TS``
into a frozen tree of steps and repetition blocks.
"""

from notation_parser.assembler import parse_workout
from notation_parser.models import (
    INTENSITY_LABELS,
    Intensity,
    IntensityType,
    ParsedWorkout,
    RepetitionBlock,
    Step,
    StepKind,
)

__all__ = [
    "INTENSITY_LABELS",
    "Intensity",
    "IntensityType",
    "ParsedWorkout",
    "RepetitionBlock",
    "Step",
    "StepKind",
    "parse_workout",
]
