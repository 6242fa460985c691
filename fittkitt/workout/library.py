"""Built-in exercise pools and intensity-based selection."""

from __future__ import annotations

import random
from typing import Literal

from fittkitt.workout.model import Exercise, WorkoutPlan


IntensityTier = Literal["low", "moderate", "high"]


LOW_INTENSITY_POOL: tuple[str, ...] = (
    # Walking / movement
    "Walking in Place",
    "Marching in Place",
    "Toe Taps",
    "Heel-to-toe Walk",
    # Seated
    "Seated Leg Lifts",
    "Seated Knee Extensions",
    "Seated Torso Twists",
    # Standing
    "Wall Push-ups",
    "Standing Calf Raises",
    "Side Leg Lifts",
    "Standing Side Bends",
    "Chair-assisted Squats",
    # Floor
    "Glute Bridges",
    "Pelvic Tilts",
    "Bird-dog Exercise",
    "Dead Bug Exercise",
    # Upper body
    "Shoulder Rolls",
    "Neck Stretches",
    "Gentle Arm Circles",
    "Slow Controlled Lunges",
)

MODERATE_INTENSITY_POOL: tuple[str, ...] = (
    # Lower body
    "Bodyweight Squats",
    "Goblet Squats",
    "Lunges with Dumbbells",
    "Step-ups",
    "Bulgarian Split Squats",
    "Romanian Deadlifts",
    "Calf Raises with Dumbbells",
    "Glute Bridges with Dumbbell",
    "Hip Thrusts with Resistance Band",
    "Side-lying Leg Lifts with Band",
    # Upper body
    "Push-ups",
    "Incline Push-ups",
    "Dumbbell Bench Press",
    "Dumbbell Shoulder Press",
    "Bent-over Dumbbell Rows",
    "Dumbbell Bicep Curls",
    "Triceps Dips",
    "Overhead Triceps Extensions",
    "Lateral Raises with Dumbbells",
    "Front Raises with Dumbbells",
    # Core / functional
    "Plank with Shoulder Taps",
    "Side Plank with Hip Dips",
    "Russian Twists with Dumbbell",
    "Bicycle Crunches",
    "Dead Bug Exercise with Resistance Bands",
    "Seated Resistance Band Rows",
    "Resistance Band Lateral Walks",
    "Resistance Band Shoulder Presses",
    "Standing Banded Leg Curls",
    "Band-assisted Pull-aparts",
)

HIGH_INTENSITY_POOL: tuple[str, ...] = (
    # Lower body
    "Jump Squats",
    "Bulgarian Split Squats with Dumbbells",
    "Jump Lunges",
    "Pistol Squats",
    "Step-ups with Dumbbells",
    "Romanian Deadlifts with Heavy Dumbbells",
    "Glute Bridges with Resistance Band and Dumbbell",
    "Wall Sits with Dumbbell Press",
    "Explosive Calf Raises",
    "Banded Lateral Walks",
    # Upper body
    "Burpees",
    "Push-up to Dumbbell Row",
    "Clap Push-ups",
    "Handstand Push-ups Against Wall",
    "Dumbbell Thrusters",
    "Overhead Dumbbell Press with Squat",
    "Renegade Rows with Dumbbells",
    "Triceps Dips",
    "Bicep Curls to Shoulder Press",
    "Resistance Band Overhead Presses",
    # Core / functional
    "Plank with Dumbbell Drag",
    "Side Plank with Resistance Band Row",
    "Russian Twists with Heavy Dumbbell",
    "Hanging Knee Raises with Resistance Band",
    "Mountain Climbers at High Speed",
    "Bicycle Crunches with Dumbbell Hold",
    "Jumping Jacks with Resistance Bands",
    "Medicine Ball Slams",
    "Kettlebell Swings",
    "Battle Rope Exercises",
)

POOLS: dict[IntensityTier, tuple[str, ...]] = {
    "low": LOW_INTENSITY_POOL,
    "moderate": MODERATE_INTENSITY_POOL,
    "high": HIGH_INTENSITY_POOL,
}

_CATEGORIES: dict[str, str] = {
    "Push-ups": "Strength Training",
    "Squats": "Strength Training",
    "Lunges": "Strength Training",
    "Glute Bridges": "Strength Training",
    "Mountain Climbers": "Cardio",
    "Burpees": "Cardio",
    "Jump Squats": "Cardio",
    "Walking in Place": "Cardio",
    "Plank": "Core",
    "Seated Leg Lifts": "Core",
}


def intensity_tier(intensity: int) -> IntensityTier:
    if 1 <= intensity <= 3:
        return "low"
    if 4 <= intensity <= 6:
        return "moderate"
    if 7 <= intensity <= 10:
        return "high"
    return "moderate"


def exercise_pool(intensity: int) -> tuple[str, ...]:
    return POOLS[intensity_tier(intensity)]


def select_exercises(
    intensity: int,
    count: int,
    rng: random.Random | None = None,
) -> tuple[Exercise, ...]:
    """Draw up to ``count`` distinct exercises from the pool for ``intensity``.

    Names come out in random order; ``count`` is capped at the pool size.
    """
    if count <= 0:
        return ()
    pool = exercise_pool(intensity)
    picker = rng or random.Random()
    names = picker.sample(pool, min(count, len(pool)))
    return tuple(Exercise(name=name) for name in names)


def build_workout_plan(
    total_duration_minutes: int,
    exercise_count: int,
    intensity: int,
    rng: random.Random | None = None,
) -> WorkoutPlan:
    return WorkoutPlan(
        exercises=select_exercises(intensity, exercise_count, rng=rng),
        total_duration_minutes=total_duration_minutes,
        intensity=intensity,
    )


def describe_intensity(intensity: int) -> str:
    """Slider label; bands are 1-3/4-7/8-10, unlike the pool tiers."""
    if 1 <= intensity <= 3:
        return "Low intensity - good for beginners or recovery days"
    if 4 <= intensity <= 7:
        return "Moderate intensity - balanced workout"
    if 8 <= intensity <= 10:
        return "High intensity - challenging workout for experienced users"
    return ""


def exercise_category(name: str) -> str:
    return _CATEGORIES.get(name, "General Fitness")
