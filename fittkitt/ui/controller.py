"""Controller the UI layer drives: settings in, scheduler state out."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Optional

from fittkitt.core.clock import Clock
from fittkitt.core.events import EventListener, SchedulerEvent, WorkoutEvent
from fittkitt.core.state import Phase
from fittkitt.workout.history import WorkoutHistory, WorkoutLog, now_utc
from fittkitt.workout.library import build_workout_plan
from fittkitt.workout.model import WorkoutPlan
from fittkitt.workout.scheduler import IntervalScheduler
from fittkitt.workout.settings import WorkoutSettings


class WorkoutController:
    def __init__(
        self,
        clock: Clock,
        settings: WorkoutSettings | None = None,
        rng: random.Random | None = None,
        history: WorkoutHistory | None = None,
        now: Callable[[], datetime] = now_utc,
    ) -> None:
        self._clock = clock
        self.settings = (settings or WorkoutSettings()).validate()
        self._rng = rng or random.Random()
        self.history = history or WorkoutHistory()
        self._now = now
        self._scheduler: Optional[IntervalScheduler] = None
        self._plan: Optional[WorkoutPlan] = None
        self._started_at: Optional[datetime] = None

    @property
    def scheduler(self) -> IntervalScheduler | None:
        return self._scheduler

    @property
    def plan(self) -> WorkoutPlan | None:
        return self._plan

    @property
    def workout_running(self) -> bool:
        return self._scheduler is not None and self._scheduler.phase not in (
            Phase.IDLE,
            Phase.COMPLETE,
        )

    def update_settings(self, settings: WorkoutSettings) -> None:
        self.settings = settings.validate()

    def begin(self, *listeners: EventListener) -> IntervalScheduler:
        if self.workout_running:
            raise RuntimeError("Workout already running")

        settings = self.settings
        plan = build_workout_plan(
            settings.duration_minutes,
            settings.exercise_count,
            settings.intensity,
            rng=self._rng,
        )
        scheduler = IntervalScheduler(self._clock)
        scheduler.add_listener(self._on_event)
        for listener in listeners:
            scheduler.add_listener(listener)

        self._plan = plan
        self._scheduler = scheduler
        self._started_at = self._now()
        scheduler.start(plan.exercises, plan.total_duration_minutes)
        return scheduler

    def toggle_pause(self) -> None:
        if self._scheduler is None:
            return
        if self._scheduler.is_paused:
            self._scheduler.resume()
        else:
            self._scheduler.pause()

    def finish(self, save: bool) -> None:
        if self._scheduler is None:
            return
        self._scheduler.stop(completed=save)

    def _on_event(self, event: SchedulerEvent) -> None:
        if event.kind is not WorkoutEvent.WORKOUT_COMPLETE or self._plan is None:
            return
        self.history.add(
            WorkoutLog(
                logged_at=self._started_at or self._now(),
                duration_minutes=self._plan.total_duration_minutes,
                exercise_count=len(self._plan.exercises),
                intensity=self._plan.intensity,
                completed=bool(event.completed),
            )
        )
