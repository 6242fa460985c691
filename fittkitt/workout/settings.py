"""User-selected workout parameters and their allowed ranges."""

from __future__ import annotations

from dataclasses import dataclass


DURATION_RANGE_MINUTES = (5, 120)
DURATION_STEP_MINUTES = 5
EXERCISE_COUNT_RANGE = (3, 15)
INTENSITY_RANGE = (1, 10)


class WorkoutSettingsError(ValueError):
    """Raised when workout settings fall outside the supported ranges."""


@dataclass(frozen=True)
class WorkoutSettings:
    duration_minutes: int = 30
    exercise_count: int = 5
    intensity: int = 5

    @classmethod
    def reset(cls) -> WorkoutSettings:
        return cls()

    def validate(self) -> WorkoutSettings:
        _check_range("duration_minutes", self.duration_minutes, DURATION_RANGE_MINUTES)
        if self.duration_minutes % DURATION_STEP_MINUTES != 0:
            raise WorkoutSettingsError(
                f"duration_minutes must be a multiple of {DURATION_STEP_MINUTES}"
            )
        _check_range("exercise_count", self.exercise_count, EXERCISE_COUNT_RANGE)
        _check_range("intensity", self.intensity, INTENSITY_RANGE)
        return self


def _check_range(field_name: str, value: int, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if not isinstance(value, int) or isinstance(value, bool):
        raise WorkoutSettingsError(f"{field_name} must be an integer")
    if not low <= value <= high:
        raise WorkoutSettingsError(f"{field_name} must be between {low} and {high}")
