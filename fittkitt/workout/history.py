"""In-memory log of finished workouts and day streaks."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone


@dataclass(frozen=True)
class WorkoutLog:
    logged_at: datetime
    duration_minutes: int
    exercise_count: int
    intensity: int
    completed: bool

    @property
    def day(self) -> date:
        return self.logged_at.date()


def now_utc() -> datetime:
    return datetime.now(tz=timezone.utc)


class WorkoutHistory:
    def __init__(self) -> None:
        self._logs: list[WorkoutLog] = []

    @property
    def logs(self) -> tuple[WorkoutLog, ...]:
        """Newest first."""
        return tuple(self._logs)

    def add(self, log: WorkoutLog) -> None:
        self._logs.append(log)
        self._logs.sort(key=lambda item: item.logged_at, reverse=True)

    def load_recent(self, limit: int = 20) -> list[WorkoutLog]:
        return list(self._logs[: max(0, limit)])

    @property
    def current_streak(self) -> int:
        """Consecutive days ending at the most recent workout."""
        days = _distinct_days(self._logs)
        if not days:
            return 0
        streak = 1
        for previous, current in zip(days, days[1:]):
            if previous - current != timedelta(days=1):
                break
            streak += 1
        return streak

    @property
    def longest_streak(self) -> int:
        days = _distinct_days(self._logs)
        if not days:
            return 0
        best = run = 1
        for previous, current in zip(days, days[1:]):
            run = run + 1 if previous - current == timedelta(days=1) else 1
            best = max(best, run)
        return best


def _distinct_days(logs: list[WorkoutLog]) -> list[date]:
    # Several workouts on one day count once.
    return sorted({log.day for log in logs}, reverse=True)
