from __future__ import annotations

import asyncio
import logging

import pytest

from fittkitt.core.clock import AsyncioClock, ManualClock
from fittkitt.core.events import SchedulerEvent, WorkoutEvent
from fittkitt.core.state import Phase
from fittkitt.workout import scheduler as scheduler_module
from fittkitt.workout.model import Exercise
from fittkitt.workout.scheduler import IntervalScheduler


def test_manual_clock_fires_in_time_order() -> None:
    clock = ManualClock()
    fired: list[tuple[str, float]] = []

    clock.call_later(2.5, lambda: fired.append(("once", clock.now)))
    handle = clock.every(1.0, lambda: fired.append(("tick", clock.now)))

    clock.advance(3)
    assert fired == [("tick", 1.0), ("tick", 2.0), ("once", 2.5), ("tick", 3.0)]
    assert clock.now == 3.0

    handle.cancel()
    clock.advance(5)
    assert len(fired) == 4
    assert clock.pending == 0


def test_manual_clock_cancel_from_inside_callback() -> None:
    clock = ManualClock()
    ticks: list[float] = []
    holder: dict[str, object] = {}

    def _tick() -> None:
        ticks.append(clock.now)
        if len(ticks) == 2:
            holder["handle"].cancel()  # type: ignore[attr-defined]

    holder["handle"] = clock.every(1.0, _tick)
    clock.run_until_idle()

    assert ticks == [1.0, 2.0]


def test_manual_clock_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        ManualClock().every(0, lambda: None)


def test_asyncio_clock_ticks_and_cancels() -> None:
    async def _run() -> None:
        clock = AsyncioClock()
        ticks: list[int] = []
        once: list[bool] = []

        handle = clock.every(0.01, lambda: ticks.append(1))
        clock.call_later(0.02, lambda: once.append(True))
        await asyncio.sleep(0.08)
        handle.cancel()
        seen = len(ticks)
        await asyncio.sleep(0.05)

        assert seen >= 3
        assert len(ticks) == seen
        assert once == [True]

    asyncio.run(_run())


def test_scheduler_on_asyncio_clock_runs_to_completion(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scheduler_module, "TICK_INTERVAL_SEC", 0.01)
    monkeypatch.setattr(scheduler_module, "EXERCISE_TRANSITION_DELAY_SEC", 0.02)

    async def _run() -> None:
        scheduler = IntervalScheduler(AsyncioClock())
        done = asyncio.Event()
        events: list[SchedulerEvent] = []

        def _on_event(event: SchedulerEvent) -> None:
            events.append(event)
            if event.kind is WorkoutEvent.WORKOUT_COMPLETE:
                done.set()

        scheduler.add_listener(_on_event)
        scheduler.start(
            [Exercise("A", work_sec=2, rest_sec=1), Exercise("B", work_sec=2, rest_sec=1)],
            total_duration_minutes=0,
        )
        await asyncio.wait_for(done.wait(), timeout=5.0)

        assert scheduler.phase is Phase.COMPLETE
        assert events[-1].completed is True
        starts = [e.snapshot.current_exercise_name for e in events if e.kind is WorkoutEvent.WORK_START]
        assert starts == ["A", "B"]

    asyncio.run(_run())


def test_pause_on_asyncio_clock_freezes_countdown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scheduler_module, "TICK_INTERVAL_SEC", 0.01)

    async def _run() -> None:
        scheduler = IntervalScheduler(AsyncioClock())
        scheduler.start([Exercise("A", work_sec=50, rest_sec=5)], total_duration_minutes=0)
        await asyncio.sleep(0.05)

        scheduler.pause()
        frozen = scheduler.time_remaining
        assert frozen < 50
        await asyncio.sleep(0.05)
        assert scheduler.time_remaining == frozen

        scheduler.resume()
        await asyncio.sleep(0.05)
        assert scheduler.time_remaining < frozen

        scheduler.stop(completed=False)
        assert scheduler.phase is Phase.COMPLETE

    asyncio.run(_run())


def test_manual_clock_rejects_negative_advance() -> None:
    clock = ManualClock()
    clock.advance(2)
    with pytest.raises(ValueError):
        clock.advance(-1)
    assert clock.now == 2.0


def test_asyncio_clock_keeps_ticking_after_callback_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    async def _run() -> None:
        clock = AsyncioClock()
        ticks: list[int] = []

        def _tick() -> None:
            ticks.append(1)
            if len(ticks) == 1:
                raise RuntimeError("tick handler exploded")

        handle = clock.every(0.01, _tick)
        await asyncio.sleep(0.08)
        handle.cancel()

        assert len(ticks) >= 3

    with caplog.at_level(logging.ERROR):
        asyncio.run(_run())

    assert "Tick callback failed" in caplog.text
