"""Executed-order view of a parsed workout.

Exporters and analysis code want the workout as the watch would run it:
a flat list of steps with every repetition block unrolled. Totals and
the tabular frame are derived from that list.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pandas as pd

from notation_parser.models.workout import ParsedWorkout, RepetitionBlock, Step, WorkoutItem

STEP_COLUMNS = (
    "order",
    "kind",
    "distance_m",
    "duration_s",
    "intensity",
    "label",
    "mark_lap",
)


def iter_executed_steps(workout: ParsedWorkout) -> Iterator[Step]:
    """Yield warmup, the unrolled items, then cooldown."""
    yield workout.warmup
    yield from _unroll(workout.items)
    yield workout.cooldown


def _unroll(items: Iterable[WorkoutItem]) -> Iterator[Step]:
    for item in items:
        if isinstance(item, RepetitionBlock):
            for _ in range(item.times):
                yield from _unroll(item.items)
        else:
            yield item


def total_distance_meters(workout: ParsedWorkout) -> float:
    """Sum of step distances over the executed workout."""
    return sum(step.distance_meters or 0.0 for step in iter_executed_steps(workout))


def total_duration_seconds(workout: ParsedWorkout) -> int:
    """Sum of step durations over the executed workout."""
    return sum(step.duration_seconds or 0 for step in iter_executed_steps(workout))


def steps_frame(workout: ParsedWorkout) -> pd.DataFrame:
    """One row per executed step.

    Missing distances/durations are NaN / <NA> so that column sums and
    ``describe()`` behave.
    """
    rows = []
    for order, step in enumerate(iter_executed_steps(workout), start=1):
        rows.append({
            "order": order,
            "kind": step.kind.value,
            "distance_m": step.distance_meters,
            "duration_s": step.duration_seconds,
            "intensity": step.intensity.code.value if step.intensity else None,
            "label": step.intensity.label if step.intensity else None,
            "mark_lap": step.mark_lap,
        })
    frame = pd.DataFrame(rows, columns=list(STEP_COLUMNS))
    frame["distance_m"] = frame["distance_m"].astype("float64")
    frame["duration_s"] = frame["duration_s"].astype("Int64")
    return frame
