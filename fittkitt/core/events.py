"""Timing events published by the interval scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from fittkitt.workout.scheduler import SchedulerSnapshot


class WorkoutEvent(str, Enum):
    WORK_START = "work_start"
    REST_START = "rest_start"
    IMMINENT_COUNTDOWN = "imminent_countdown"
    EXERCISE_COMPLETE = "exercise_complete"
    WORKOUT_COMPLETE = "workout_complete"

    @property
    def sound_file(self) -> str | None:
        """Name of the audio cue the player should load, without extension."""
        return _SOUND_FILES.get(self)


_SOUND_FILES: dict[WorkoutEvent, str] = {
    WorkoutEvent.WORK_START: "start_work",
    WorkoutEvent.REST_START: "start_rest",
    WorkoutEvent.IMMINENT_COUNTDOWN: "countdown",
    WorkoutEvent.WORKOUT_COMPLETE: "complete",
}


@dataclass(frozen=True)
class SchedulerEvent:
    kind: WorkoutEvent
    snapshot: SchedulerSnapshot
    completed: bool | None = None


EventListener = Callable[[SchedulerEvent], None]


@dataclass
class WorkoutCallbacks:
    """Named hooks, one per event kind. Usable directly as a listener."""

    on_work_start: Optional[EventListener] = None
    on_rest_start: Optional[EventListener] = None
    on_imminent_countdown: Optional[EventListener] = None
    on_exercise_complete: Optional[EventListener] = None
    on_workout_complete: Optional[EventListener] = None

    def __call__(self, event: SchedulerEvent) -> None:
        handler = {
            WorkoutEvent.WORK_START: self.on_work_start,
            WorkoutEvent.REST_START: self.on_rest_start,
            WorkoutEvent.IMMINENT_COUNTDOWN: self.on_imminent_countdown,
            WorkoutEvent.EXERCISE_COMPLETE: self.on_exercise_complete,
            WorkoutEvent.WORKOUT_COMPLETE: self.on_workout_complete,
        }[event.kind]
        if handler is not None:
            handler(event)
