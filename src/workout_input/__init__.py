"""Workout input layer: form validation, configuration and CLI."""

from workout_input.exceptions import (
    EmptyWorkoutError,
    WorkoutInputError,
    WorkoutTooDeepError,
    WorkoutTooLongError,
)
from workout_input.gate import (
    EXAMPLE_WORKOUT,
    intensity_references,
    nesting_depth,
    submit_workout,
)

__all__ = [
    "EXAMPLE_WORKOUT",
    "EmptyWorkoutError",
    "WorkoutInputError",
    "WorkoutTooDeepError",
    "WorkoutTooLongError",
    "intensity_references",
    "nesting_depth",
    "submit_workout",
]
