"""Tests for the atomic step parser and the combined-step splitter."""

from __future__ import annotations

import pytest

from notation_parser.models.enums import IntensityType, StepKind
from notation_parser.models.workout import Intensity, Step
from notation_parser.steps import parse_step, parse_steps, split_combined_step


class TestParseStepRest:
    def test_pause_in_place(self):
        step = parse_step("PL.1'30\"")
        assert step == Step(kind=StepKind.REST, duration_seconds=90)

    def test_pause_without_dot(self):
        assert parse_step("PL 2'") == Step(kind=StepKind.REST, duration_seconds=120)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Rec.1'30\"", 90),
            ("Rec. 3'", 180),
            ("rec 45\"", 45),
            ("REST 2'", 120),
        ],
    )
    def test_recovery(self, text, expected):
        step = parse_step(text)
        assert step.kind == StepKind.REST
        assert step.duration_seconds == expected
        assert step.intensity is None

    def test_recovery_without_duration_is_dropped(self):
        assert parse_step("Rec.") is None
        assert parse_step("Rec 2") is None


class TestParseStepRun:
    def test_distance_with_code(self):
        step = parse_step("800 TR")
        assert step == Step(
            kind=StepKind.RUN,
            distance_meters=800.0,
            intensity=Intensity(IntensityType.TR),
        )

    def test_glued_code(self):
        step = parse_step("500TL")
        assert step.distance_meters == 500.0
        assert step.intensity.code == IntensityType.TL

    def test_km_distance(self):
        step = parse_step("1,5km RC")
        assert step.distance_meters == 1500.0
        assert step.intensity.label == "Ritmo de Competición"

    def test_distance_without_code(self):
        step = parse_step("800m")
        assert step.kind == StepKind.RUN
        assert step.distance_meters == 800.0
        assert step.intensity is None

    def test_timed_run(self):
        step = parse_step("3' TR")
        assert step == Step(
            kind=StepKind.RUN,
            duration_seconds=180,
            intensity=Intensity(IntensityType.TR),
        )

    def test_timed_pause_code_is_rest(self):
        step = parse_step("1'30\" PL")
        assert step.kind == StepKind.REST
        assert step.duration_seconds == 90
        assert step.intensity.code == IntensityType.PL


class TestParseStepDropped:
    @pytest.mark.parametrize("text", ["", "   ", "800", "TL", "foo bar", "PL.5"])
    def test_unrecognised_fragment_yields_nothing(self, text):
        assert parse_step(text) is None


class TestSplitCombinedStep:
    def test_run_and_recovery(self):
        assert split_combined_step("400 TL Rec.1'30\"") == ["400 TL", "Rec.1'30\""]

    def test_km_with_spaced_recovery(self):
        assert split_combined_step("1km TR Rec. 3'") == ["1km TR", "Rec. 3'"]

    def test_glued_distance_and_code(self):
        assert split_combined_step("500TL Rec.1'30\"") == ["500 TL", "Rec.1'30\""]

    def test_single_step_passes_through(self):
        assert split_combined_step("800 TR") == ["800 TR"]
        assert split_combined_step(" Rec.2' ") == ["Rec.2'"]


class TestParseSteps:
    def test_combined_fragment_gives_two_siblings(self):
        steps = parse_steps("400 TL Rec.1'30\"")
        assert steps == [
            Step(kind=StepKind.RUN, distance_meters=400.0, intensity=Intensity(IntensityType.TL)),
            Step(kind=StepKind.REST, duration_seconds=90),
        ]

    def test_garbage_gives_empty_list(self):
        assert parse_steps("nothing here") == []
