from __future__ import annotations

import random

import pytest

from fittkitt.workout.library import (
    HIGH_INTENSITY_POOL,
    LOW_INTENSITY_POOL,
    MODERATE_INTENSITY_POOL,
    build_workout_plan,
    describe_intensity,
    exercise_category,
    exercise_pool,
    intensity_tier,
    select_exercises,
)


def test_pools_have_no_duplicate_names() -> None:
    for pool in (LOW_INTENSITY_POOL, MODERATE_INTENSITY_POOL, HIGH_INTENSITY_POOL):
        assert len(set(pool)) == len(pool)
    assert len(LOW_INTENSITY_POOL) == 20
    assert len(MODERATE_INTENSITY_POOL) == 30
    assert len(HIGH_INTENSITY_POOL) == 30


@pytest.mark.parametrize(
    ("intensity", "tier"),
    [
        (1, "low"),
        (3, "low"),
        (4, "moderate"),
        (6, "moderate"),
        (7, "high"),
        (10, "high"),
        (0, "moderate"),
        (11, "moderate"),
        (-5, "moderate"),
    ],
)
def test_intensity_tier_mapping(intensity: int, tier: str) -> None:
    assert intensity_tier(intensity) == tier


def test_select_exercises_draws_distinct_names_from_mapped_pool() -> None:
    rng = random.Random(7)
    for intensity in range(1, 11):
        for count in (1, 5, 15):
            picked = select_exercises(intensity, count, rng=rng)
            names = [exercise.name for exercise in picked]
            assert len(names) == count
            assert len(set(names)) == count
            assert set(names) <= set(exercise_pool(intensity))
            assert all(e.work_sec == 30 and e.rest_sec == 15 for e in picked)


def test_select_exercises_caps_at_pool_size() -> None:
    picked = select_exercises(2, 50, rng=random.Random(1))
    assert len(picked) == len(LOW_INTENSITY_POOL)
    assert {e.name for e in picked} == set(LOW_INTENSITY_POOL)


def test_select_exercises_non_positive_count_is_empty() -> None:
    assert select_exercises(5, 0) == ()
    assert select_exercises(5, -3) == ()


def test_select_exercises_is_deterministic_with_seed() -> None:
    first = select_exercises(8, 6, rng=random.Random(42))
    second = select_exercises(8, 6, rng=random.Random(42))
    assert first == second


def test_build_workout_plan_carries_settings() -> None:
    plan = build_workout_plan(30, 5, 9, rng=random.Random(3))
    assert plan.total_duration_minutes == 30
    assert plan.intensity == 9
    assert len(plan.exercises) == 5
    assert set(plan.exercise_names) <= set(HIGH_INTENSITY_POOL)
    assert plan.exercises[0].total_duration_sec == 45


def test_describe_intensity_uses_slider_bands() -> None:
    assert describe_intensity(2).startswith("Low intensity")
    assert describe_intensity(7).startswith("Moderate intensity")
    assert describe_intensity(8).startswith("High intensity")
    assert describe_intensity(0) == ""


def test_exercise_category_lookup() -> None:
    assert exercise_category("Push-ups") == "Strength Training"
    assert exercise_category("Burpees") == "Cardio"
    assert exercise_category("Seated Leg Lifts") == "Core"
    assert exercise_category("Kettlebell Swings") == "General Fitness"
