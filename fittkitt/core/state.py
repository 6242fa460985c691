"""Mutable runtime state owned by the interval scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fittkitt.workout.model import Exercise


class Phase(str, Enum):
    IDLE = "idle"
    WORKING = "working"
    RESTING = "resting"
    EXERCISE_TRANSITION = "exercise_transition"
    COMPLETE = "complete"


@dataclass
class SchedulerState:
    exercises: tuple[Exercise, ...] = ()
    current_exercise_index: int = 0
    current_round: int = 1
    total_rounds: int = 1
    time_remaining: int = 0
    phase: Phase = Phase.IDLE
    is_paused: bool = False

    @property
    def is_counting(self) -> bool:
        return self.phase in (Phase.WORKING, Phase.RESTING)
