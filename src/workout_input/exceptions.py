"""Exception hierarchy for caller-visible workout input errors."""

from __future__ import annotations


class WorkoutInputError(Exception):
    """Base exception for all workout_input errors."""


class EmptyWorkoutError(WorkoutInputError):
    """No notation was supplied (empty or whitespace-only text)."""

    def __init__(self, message: str = "Please enter a workout") -> None:
        super().__init__(message)


class WorkoutTooLongError(WorkoutInputError):
    """The notation exceeds the configured maximum length."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Workout text is {length} characters long (limit {limit})")
        self.length = length
        self.limit = limit


class WorkoutTooDeepError(WorkoutInputError):
    """Parentheses are nested deeper than the configured maximum."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"Workout nests {depth} levels of parentheses (limit {limit})")
        self.depth = depth
        self.limit = limit
