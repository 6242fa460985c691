"""Round-based work/rest countdown across a sequence of exercises."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from fittkitt.core.clock import Clock, Handle
from fittkitt.core.events import EventListener, SchedulerEvent, WorkoutEvent
from fittkitt.core.state import Phase, SchedulerState
from fittkitt.workout.model import Exercise


logger = logging.getLogger(__name__)

TICK_INTERVAL_SEC = 1.0
EXERCISE_TRANSITION_DELAY_SEC = 2.0
IMMINENT_THRESHOLD_SEC = 3


@dataclass(frozen=True)
class SchedulerSnapshot:
    phase: Phase
    time_remaining: int
    current_exercise_index: int
    exercise_total: int
    current_round: int
    total_rounds: int
    is_paused: bool
    current_exercise_name: str | None
    next_exercise_name: str | None


def compute_total_rounds(
    total_duration_minutes: int,
    exercise_count: int,
    round_duration_sec: int,
) -> int:
    """Rounds per exercise, floored at one.

    Both divisions truncate, so a short workout with many exercises still
    gets a single round each.
    """
    if exercise_count <= 0 or round_duration_sec <= 0:
        return 1
    seconds_per_exercise = (total_duration_minutes * 60) // exercise_count
    return max(1, seconds_per_exercise // round_duration_sec)


class IntervalScheduler:
    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self._state = SchedulerState()
        self._listeners: list[EventListener] = []
        self._tick_handle: Optional[Handle] = None
        self._advance_handle: Optional[Handle] = None

    def add_listener(self, listener: EventListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def time_remaining(self) -> int:
        return self._state.time_remaining

    @property
    def current_exercise_index(self) -> int:
        return self._state.current_exercise_index

    @property
    def current_round(self) -> int:
        return self._state.current_round

    @property
    def total_rounds(self) -> int:
        return self._state.total_rounds

    @property
    def is_paused(self) -> bool:
        return self._state.is_paused

    @property
    def exercises(self) -> tuple[Exercise, ...]:
        return self._state.exercises

    @property
    def current_exercise(self) -> Exercise | None:
        index = self._state.current_exercise_index
        if 0 <= index < len(self._state.exercises):
            return self._state.exercises[index]
        return None

    @property
    def next_exercise(self) -> Exercise | None:
        index = self._state.current_exercise_index + 1
        if index < len(self._state.exercises):
            return self._state.exercises[index]
        return None

    def snapshot(self) -> SchedulerSnapshot:
        current = self.current_exercise
        upcoming = self.next_exercise
        return SchedulerSnapshot(
            phase=self._state.phase,
            time_remaining=self._state.time_remaining,
            current_exercise_index=self._state.current_exercise_index,
            exercise_total=len(self._state.exercises),
            current_round=self._state.current_round,
            total_rounds=self._state.total_rounds,
            is_paused=self._state.is_paused,
            current_exercise_name=current.name if current is not None else None,
            next_exercise_name=upcoming.name if upcoming is not None else None,
        )

    def start(self, exercises: Sequence[Exercise], total_duration_minutes: int) -> None:
        if self._state.phase is not Phase.IDLE:
            logger.debug("start ignored in phase %s", self._state.phase.value)
            return
        if not exercises:
            logger.warning("Workout not started: exercise sequence is empty")
            return

        sequence = tuple(exercises)
        state = self._state
        state.exercises = sequence
        state.total_rounds = compute_total_rounds(
            total_duration_minutes,
            len(sequence),
            sequence[0].total_duration_sec,
        )
        state.current_exercise_index = 0
        state.current_round = 1
        state.phase = Phase.WORKING
        state.is_paused = False
        state.time_remaining = sequence[0].work_sec
        logger.info(
            "Workout started: %d exercises x %d rounds (%d min requested)",
            len(sequence),
            state.total_rounds,
            total_duration_minutes,
        )
        self._emit(WorkoutEvent.WORK_START)
        if self._state.is_counting and not self._state.is_paused:
            self._start_ticking()

    def pause(self) -> None:
        if not self._state.is_counting or self._state.is_paused:
            logger.debug("pause ignored in phase %s", self._state.phase.value)
            return
        self._stop_ticking()
        self._state.is_paused = True

    def resume(self) -> None:
        if not self._state.is_paused:
            logger.debug("resume ignored: not paused")
            return
        self._state.is_paused = False
        self._start_ticking()

    def stop(self, completed: bool) -> None:
        if self._state.phase is Phase.COMPLETE:
            logger.debug("stop ignored: workout already complete")
            return
        self._finish(completed)

    def _start_ticking(self) -> None:
        self._stop_ticking()
        self._tick_handle = self._clock.every(TICK_INTERVAL_SEC, self._on_tick)

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _on_tick(self) -> None:
        state = self._state
        if not state.is_counting or state.is_paused:
            return

        if state.time_remaining > 0:
            state.time_remaining -= 1
            if state.time_remaining < IMMINENT_THRESHOLD_SEC:
                self._emit(WorkoutEvent.IMMINENT_COUNTDOWN)
            return

        exercise = state.exercises[state.current_exercise_index]
        if state.phase is Phase.WORKING:
            state.phase = Phase.RESTING
            state.time_remaining = exercise.rest_sec
            self._emit(WorkoutEvent.REST_START)
            return

        if state.current_round < state.total_rounds:
            state.current_round += 1
            state.phase = Phase.WORKING
            state.time_remaining = exercise.work_sec
            self._emit(WorkoutEvent.WORK_START)
            return

        self._stop_ticking()
        state.phase = Phase.EXERCISE_TRANSITION
        logger.info(
            "Exercise %d/%d complete: %s",
            state.current_exercise_index + 1,
            len(state.exercises),
            exercise.name,
        )
        self._emit(WorkoutEvent.EXERCISE_COMPLETE)
        if state.phase is not Phase.EXERCISE_TRANSITION:
            return
        self._advance_handle = self._clock.call_later(
            EXERCISE_TRANSITION_DELAY_SEC, self._advance
        )

    def _advance(self) -> None:
        self._advance_handle = None
        state = self._state
        if state.phase is not Phase.EXERCISE_TRANSITION:
            return

        if state.current_exercise_index + 1 >= len(state.exercises):
            self._finish(True)
            return

        state.current_exercise_index += 1
        state.current_round = 1
        state.phase = Phase.WORKING
        state.time_remaining = state.exercises[state.current_exercise_index].work_sec
        self._emit(WorkoutEvent.WORK_START)
        if self._state.is_counting and not self._state.is_paused:
            self._start_ticking()

    def _finish(self, completed: bool) -> None:
        self._stop_ticking()
        if self._advance_handle is not None:
            self._advance_handle.cancel()
            self._advance_handle = None
        self._state.phase = Phase.COMPLETE
        self._state.is_paused = False
        logger.info("Workout finished (completed=%s)", completed)
        self._emit(WorkoutEvent.WORKOUT_COMPLETE, completed=completed)

    def _emit(self, kind: WorkoutEvent, completed: bool | None = None) -> None:
        event = SchedulerEvent(kind=kind, snapshot=self.snapshot(), completed=completed)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener failed on %s", kind.value)
