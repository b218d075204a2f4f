"""Shared test fixtures: sample notations and parsed workouts."""

from __future__ import annotations

import pytest

from notation_parser import ParsedWorkout, parse_workout

INTERVALS_NOTATION = "2km TS + 4 x 400 TL Rec.1'30\" + 1km TS"
NESTED_NOTATION = "2 x (3 x 500TL Rec.1'30\")"
FULL_SESSION_NOTATION = (
    "2km TS + (3 x 800 TR x 200 TS) + 2 x (3 x 500TL Rec.1'30\") PL.1'30\" + 2km TS"
)


@pytest.fixture
def intervals_workout() -> ParsedWorkout:
    """Warmup 2km, 4 x (400 TL + 90s rest), cooldown 1km."""
    return parse_workout(INTERVALS_NOTATION)


@pytest.fixture
def nested_workout() -> ParsedWorkout:
    """2 x (3 x (500 TL + 90s rest)); no explicit warmup/cooldown."""
    return parse_workout(NESTED_NOTATION)


@pytest.fixture
def full_session_workout() -> ParsedWorkout:
    """Warmup, a flat block, a nested block with trailing pause, cooldown."""
    return parse_workout(FULL_SESSION_NOTATION, name="ENERO - ENTRENAMIENTO 2", date="January 8, 2026")
