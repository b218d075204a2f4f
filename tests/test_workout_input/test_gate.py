"""Tests for the input gate in front of the parser."""

from __future__ import annotations

import logging

import pytest

from workout_input import config
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


class TestSubmitWorkout:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_rejected(self, text):
        with pytest.raises(EmptyWorkoutError, match="Please enter a workout"):
            submit_workout(text)

    def test_errors_share_a_base(self):
        assert issubclass(EmptyWorkoutError, WorkoutInputError)
        assert issubclass(WorkoutTooLongError, WorkoutInputError)
        assert issubclass(WorkoutTooDeepError, WorkoutInputError)

    def test_parses_example(self):
        workout = submit_workout(EXAMPLE_WORKOUT)
        assert workout.warmup.distance_meters == 2000.0
        assert [block.times for block in workout.items] == [4, 5, 2]
        assert workout.cooldown.distance_meters == 1000.0

    def test_empty_metadata_becomes_none(self):
        workout = submit_workout("2km TS", name="", date="")
        assert workout.name is None
        assert workout.date is None

    def test_metadata_kept_verbatim(self):
        workout = submit_workout("2km TS", name=" Tempo ", date="  ")
        assert workout.name == " Tempo "
        assert workout.date == "  "

    def test_metadata_passed_through(self):
        workout = submit_workout("2km TS", name="Tempo", date="January 8, 2026")
        assert workout.name == "Tempo"
        assert workout.date == "January 8, 2026"

    def test_too_long(self):
        with pytest.raises(WorkoutTooLongError) as excinfo:
            submit_workout("2km TS + 1km TS", max_length=5)
        assert excinfo.value.length == 15
        assert excinfo.value.limit == 5

    def test_length_limit_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_LENGTH", 3)
        with pytest.raises(WorkoutTooLongError):
            submit_workout("2km TS")

    def test_too_deep(self):
        with pytest.raises(WorkoutTooDeepError) as excinfo:
            submit_workout("2 x (2 x (2 x 100 TR))", max_nesting=1)
        assert excinfo.value.depth == 2
        assert excinfo.value.limit == 1

    def test_logs_parse(self, caplog):
        with caplog.at_level(logging.INFO, logger="workout_input.gate"):
            submit_workout("2km TS + 4 x 400 TL + 1km TS", name="Series")
        assert "Series" in caplog.text


class TestNestingDepth:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2km TS", 0),
            ("(3 x 400 TL)", 1),
            ("2 x (3 x (2 x 100 TR)) x (200 TS)", 2),
            ("))(", 1),
        ],
    )
    def test_depth(self, text, expected):
        assert nesting_depth(text) == expected


class TestIntensityReferences:
    def test_display_order(self):
        codes = [code for code, _ in intensity_references()]
        assert codes == ["TS", "TL", "TR", "Ca", "PA", "RC", "PL"]

    def test_labels(self):
        assert dict(intensity_references())["PL"] == "Pausa en el lugar"
