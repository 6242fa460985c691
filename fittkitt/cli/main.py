"""Terminal CLI entrypoint for the FittKitt interval timer."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random

from fittkitt.core.engine import WorkoutEngine
from fittkitt.workout.library import POOLS, intensity_tier
from fittkitt.workout.settings import WorkoutSettings, WorkoutSettingsError


def build_parser() -> argparse.ArgumentParser:
    defaults = WorkoutSettings.reset()
    parser = argparse.ArgumentParser(description="FittKitt interval workout timer")
    parser.add_argument(
        "--duration",
        type=int,
        default=defaults.duration_minutes,
        help="Total workout time in minutes (5-120, step 5)",
    )
    parser.add_argument(
        "--exercises",
        type=int,
        default=defaults.exercise_count,
        help="Number of exercises (3-15)",
    )
    parser.add_argument(
        "--intensity",
        type=int,
        default=defaults.intensity,
        help="Intensity score (1-10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for exercise selection (repeatable workouts)",
    )
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Run the whole workout on virtual time and print the timeline",
    )
    parser.add_argument(
        "--list-pool",
        action="store_true",
        help="Print the exercise pool for --intensity and exit",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for scheduler diagnostics",
    )
    return parser


def run_list_pool(intensity: int) -> int:
    tier = intensity_tier(intensity)
    print(f"{tier} intensity pool:")
    for name in POOLS[tier]:
        print(f"  {name}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_pool:
        return run_list_pool(args.intensity)

    settings = WorkoutSettings(
        duration_minutes=args.duration,
        exercise_count=args.exercises,
        intensity=args.intensity,
    )
    try:
        settings.validate()
    except WorkoutSettingsError as exc:
        print(f"Invalid settings: {exc}")
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    engine = WorkoutEngine(settings, rng=rng)

    if args.simulate:
        completed = engine.run_simulated()
    else:
        try:
            completed = asyncio.run(engine.run())
        except KeyboardInterrupt:
            print("Workout stopped")
            completed = False
    return 0 if completed else 1


if __name__ == "__main__":
    raise SystemExit(main())
