"""Parsed workout tree: steps, repetition blocks and the workout itself.

Every node is a frozen dataclass and every sequence a tuple, so a parse
result can be shared freely and compared structurally with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from notation_parser.models.enums import (
    INTENSITY_LABELS,
    REPETITION_KIND,
    IntensityType,
    StepKind,
)


@dataclass(frozen=True)
class Intensity:
    """An intensity zone attached to a step."""

    code: IntensityType

    @property
    def label(self) -> str:
        return INTENSITY_LABELS[self.code]

    @classmethod
    def of(cls, code: IntensityType | None) -> Intensity | None:
        """Wrap an optional code, passing None through."""
        if code is None:
            return None
        return cls(code=code)


@dataclass(frozen=True)
class Step:
    """A single atomic step.

    Distances are in meters, durations in whole seconds. ``mark_lap`` is
    only set on the synthetic warmup/cooldown steps.
    """

    kind: StepKind
    distance_meters: float | None = None
    duration_seconds: int | None = None
    intensity: Intensity | None = None
    mark_lap: bool = False


@dataclass(frozen=True)
class RepetitionBlock:
    """A group of items repeated ``times`` times; items may nest blocks."""

    times: int
    items: tuple[WorkoutItem, ...] = field(default_factory=tuple)

    @property
    def kind(self) -> str:
        return REPETITION_KIND


WorkoutItem = Union[Step, RepetitionBlock]


@dataclass(frozen=True)
class ParsedWorkout:
    """Complete parse result.

    ``warmup`` and ``cooldown`` are always present; ``items`` holds
    everything in between, in input order. ``name`` and ``date`` are
    echoed verbatim from the caller.
    """

    warmup: Step
    cooldown: Step
    items: tuple[WorkoutItem, ...] = field(default_factory=tuple)
    name: str | None = None
    date: str | None = None
