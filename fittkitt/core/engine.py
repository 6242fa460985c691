"""Terminal runtime that plays a workout and prints scheduler events."""

from __future__ import annotations

import asyncio
import random
from typing import Callable

from fittkitt.core.clock import AsyncioClock, Clock, ManualClock
from fittkitt.core.events import SchedulerEvent, WorkoutEvent
from fittkitt.ui.controller import WorkoutController
from fittkitt.workout.library import describe_intensity, exercise_category
from fittkitt.workout.settings import WorkoutSettings


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def format_event(event: SchedulerEvent) -> str:
    snap = event.snapshot
    name = snap.current_exercise_name or "-"
    position = f"{snap.current_exercise_index + 1}/{snap.exercise_total}"
    rounds = f"round {snap.current_round}/{snap.total_rounds}"
    if event.kind is WorkoutEvent.WORK_START:
        return f"[WORK] {position} {name} | {rounds} | {format_clock(snap.time_remaining)}"
    if event.kind is WorkoutEvent.REST_START:
        return f"[REST] {position} {name} | {rounds} | {format_clock(snap.time_remaining)}"
    if event.kind is WorkoutEvent.IMMINENT_COUNTDOWN:
        return f"  ... {snap.time_remaining}"
    if event.kind is WorkoutEvent.EXERCISE_COMPLETE:
        upcoming = snap.next_exercise_name
        suffix = f" | next: {upcoming}" if upcoming else ""
        return f"[DONE] {name}{suffix}"
    label = "completed" if event.completed else "discarded"
    return f"Workout {label}"


class WorkoutEngine:
    def __init__(
        self,
        settings: WorkoutSettings,
        rng: random.Random | None = None,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.settings = settings.validate()
        self._rng = rng
        self._echo = echo
        self._controller: WorkoutController | None = None
        self.completed: bool | None = None

    @property
    def controller(self) -> WorkoutController | None:
        return self._controller

    async def run(self) -> bool:
        finished = asyncio.Event()
        controller = self._build_controller(AsyncioClock())

        def _on_finish(event: SchedulerEvent) -> None:
            if event.kind is WorkoutEvent.WORKOUT_COMPLETE:
                finished.set()

        controller.begin(self._on_event, _on_finish)
        try:
            await finished.wait()
        finally:
            # Interrupted runs end as discarded; no-op once complete.
            controller.finish(save=False)
        return bool(self.completed)

    def run_simulated(self, clock: ManualClock | None = None) -> bool:
        """Play the whole workout on virtual time, without sleeping."""
        manual = clock or ManualClock()
        controller = self._build_controller(manual)
        controller.begin(self._on_event)
        manual.run_until_idle()
        controller.finish(save=False)
        self._echo(f"Simulated duration: {format_clock(int(manual.now))}")
        return bool(self.completed)

    def stop(self, save: bool = False) -> None:
        if self._controller is not None:
            self._controller.finish(save=save)

    def _build_controller(self, clock: Clock) -> WorkoutController:
        controller = WorkoutController(clock, settings=self.settings, rng=self._rng)
        self._controller = controller
        self.completed = None
        self._print_header()
        return controller

    def _print_header(self) -> None:
        s = self.settings
        self._echo(
            f"Workout: {s.duration_minutes} min | {s.exercise_count} exercises | "
            f"intensity {s.intensity}"
        )
        description = describe_intensity(s.intensity)
        if description:
            self._echo(description)

    def _on_event(self, event: SchedulerEvent) -> None:
        if event.kind is WorkoutEvent.WORK_START and event.snapshot.current_round == 1:
            name = event.snapshot.current_exercise_name or ""
            self._echo(f"--- {name} ({exercise_category(name)}) ---")
        if event.kind is WorkoutEvent.WORKOUT_COMPLETE:
            self.completed = bool(event.completed)
        self._echo(format_event(event))
