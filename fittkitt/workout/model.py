"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_WORK_SEC = 30
DEFAULT_REST_SEC = 15


@dataclass(frozen=True)
class Exercise:
    name: str
    work_sec: int = DEFAULT_WORK_SEC
    rest_sec: int = DEFAULT_REST_SEC

    def __post_init__(self) -> None:
        if self.work_sec < 0:
            raise ValueError(f"{self.name}: work_sec must be >= 0")
        if self.rest_sec < 0:
            raise ValueError(f"{self.name}: rest_sec must be >= 0")

    @property
    def total_duration_sec(self) -> int:
        return self.work_sec + self.rest_sec


@dataclass(frozen=True)
class WorkoutPlan:
    exercises: tuple[Exercise, ...]
    total_duration_minutes: int
    intensity: int

    @property
    def exercise_names(self) -> tuple[str, ...]:
        return tuple(exercise.name for exercise in self.exercises)
