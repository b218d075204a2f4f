"""Command-line front end for the workout notation parser.

Usage:
    python -m workout_input "2km TS + 4 x 400 TL Rec.1'30\" + 1km TS"
    python -m workout_input --example --table --summary
"""

from __future__ import annotations

import argparse
import logging
import sys

from notation_parser.serialization import to_json_string
from notation_parser.summary import (
    steps_frame,
    total_distance_meters,
    total_duration_seconds,
)

from workout_input import config
from workout_input.exceptions import WorkoutInputError
from workout_input.gate import EXAMPLE_WORKOUT, submit_workout

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse interval workout notation")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", help="Workout notation")
    source.add_argument("--example", action="store_true", help="Parse the sample workout")
    parser.add_argument("--name", help="Workout name stored on the result")
    parser.add_argument("--date", help="Workout date stored on the result")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print JSON (default)")
    output.add_argument("--table", action="store_true", help="Print executed steps as a table")
    parser.add_argument("--summary", action="store_true", help="Print total distance and duration")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    text = EXAMPLE_WORKOUT if args.example else args.text
    try:
        workout = submit_workout(text, name=args.name, date=args.date)
    except WorkoutInputError as exc:
        logger.error("%s", exc)
        return 2

    if args.table:
        print(steps_frame(workout).to_string(index=False))
    else:
        print(to_json_string(workout))

    if args.summary:
        distance_km = total_distance_meters(workout) / 1000
        minutes, seconds = divmod(total_duration_seconds(workout), 60)
        print(f"Total distance: {distance_km:.2f} km")
        print(f"Total timed work/rest: {minutes}:{seconds:02d}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
