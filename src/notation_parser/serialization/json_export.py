"""Plain dict / JSON form of a ParsedWorkout.

This is the structure handed to the rest of the application (display,
device exporters). Keys follow the hand-off contract:

    {"name", "date", "warmup", "blocks", "cooldown"}

with steps as ``{"type", "distance", "duration", "intensity",
"lapButtonPress"}`` and blocks as ``{"type": "repetition", "times",
"steps"}``. Optional fields that are absent are omitted.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from notation_parser.models.workout import (
    Intensity,
    ParsedWorkout,
    RepetitionBlock,
    Step,
    WorkoutItem,
)


def to_dict(workout: ParsedWorkout) -> dict:
    """Convert a ParsedWorkout to a JSON-compatible dict."""
    result: dict = {}
    if workout.name is not None:
        result["name"] = workout.name
    if workout.date is not None:
        result["date"] = workout.date
    result["warmup"] = _convert_step(workout.warmup)
    result["blocks"] = [_convert_item(item) for item in workout.items]
    result["cooldown"] = _convert_step(workout.cooldown)
    return result


def to_json_string(workout: ParsedWorkout, indent: int = 2) -> str:
    """Convert a ParsedWorkout to a JSON string."""
    return json.dumps(to_dict(workout), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_item(item: WorkoutItem) -> dict:
    if isinstance(item, RepetitionBlock):
        return _convert_block(item)
    return _convert_step(item)


def _convert_step(step: Step) -> dict:
    result: dict = {"type": step.kind.value}
    if step.distance_meters is not None:
        result["distance"] = step.distance_meters
    if step.duration_seconds is not None:
        result["duration"] = step.duration_seconds
    if step.intensity is not None:
        result["intensity"] = _convert_intensity(step.intensity)
    if step.mark_lap:
        result["lapButtonPress"] = True
    return result


def _convert_block(block: RepetitionBlock) -> dict:
    return {
        "type": block.kind,
        "times": block.times,
        "steps": [_convert_item(child) for child in block.items],
    }


def _convert_intensity(intensity: Intensity) -> dict:
    return {"type": intensity.code.value, "label": intensity.label}
