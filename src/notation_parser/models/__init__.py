"""Data models for the workout notation parser."""

from notation_parser.models.enums import (
    INTENSITY_LABELS,
    IntensityType,
    StepKind,
)
from notation_parser.models.workout import (
    Intensity,
    ParsedWorkout,
    RepetitionBlock,
    Step,
    WorkoutItem,
)

__all__ = [
    "INTENSITY_LABELS",
    "Intensity",
    "IntensityType",
    "ParsedWorkout",
    "RepetitionBlock",
    "Step",
    "StepKind",
    "WorkoutItem",
]
