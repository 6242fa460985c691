"""Tick sources driving the interval scheduler.

The scheduler never sleeps itself; it asks a :class:`Clock` for a repeating
one-second tick and for one-shot delays, and cancels them through the
returned handles. :class:`AsyncioClock` runs on a live event loop,
:class:`ManualClock` advances virtual time for tests and simulated runs.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol


logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class Handle(Protocol):
    def cancel(self) -> None: ...


class Clock(Protocol):
    def every(self, interval_sec: float, callback: TickCallback) -> Handle: ...

    def call_later(self, delay_sec: float, callback: TickCallback) -> Handle: ...


class _RepeatingTask:
    def __init__(self, interval_sec: float, callback: TickCallback) -> None:
        self._interval_sec = interval_sec
        self._callback = callback
        self._cancelled = False
        self._task: Optional[asyncio.Task[None]] = asyncio.get_running_loop().create_task(
            self._run()
        )

    def cancel(self) -> None:
        self._cancelled = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self) -> None:
        # Sleep restarts after the callback returns, so ticks never stack.
        while not self._cancelled:
            await asyncio.sleep(self._interval_sec)
            if self._cancelled:
                return
            try:
                self._callback()
            except Exception:
                logger.exception("Tick callback failed")


class AsyncioClock:
    """Clock backed by the running asyncio loop."""

    def every(self, interval_sec: float, callback: TickCallback) -> Handle:
        return _RepeatingTask(interval_sec, callback)

    def call_later(self, delay_sec: float, callback: TickCallback) -> Handle:
        return asyncio.get_running_loop().call_later(delay_sec, callback)


@dataclass(order=True)
class _Scheduled:
    due: float
    seq: int
    interval_sec: float | None = field(compare=False)
    callback: TickCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualClock:
    """Deterministic clock; time only moves when :meth:`advance` is called."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: list[_Scheduled] = []
        self._seq = itertools.count()

    def every(self, interval_sec: float, callback: TickCallback) -> Handle:
        if interval_sec <= 0:
            raise ValueError("interval_sec must be > 0")
        return self._push(self.now + interval_sec, interval_sec, callback)

    def call_later(self, delay_sec: float, callback: TickCallback) -> Handle:
        return self._push(self.now + max(0.0, delay_sec), None, callback)

    @property
    def pending(self) -> int:
        return sum(1 for item in self._queue if not item.cancelled)

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        target = self.now + seconds
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].due > target:
                break
            item = heapq.heappop(self._queue)
            self.now = item.due
            if item.interval_sec is not None:
                item.due += item.interval_sec
                item.seq = next(self._seq)
                heapq.heappush(self._queue, item)
            item.callback()
        self.now = target

    def run_until_idle(self, limit_sec: float = 24 * 3600.0) -> None:
        """Fire callbacks until nothing is pending or ``limit_sec`` passes."""
        deadline = self.now + limit_sec
        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].due > deadline:
                return
            self.advance(self._queue[0].due - self.now)

    def _push(
        self, due: float, interval_sec: float | None, callback: TickCallback
    ) -> _Scheduled:
        item = _Scheduled(
            due=due,
            seq=next(self._seq),
            interval_sec=interval_sec,
            callback=callback,
        )
        heapq.heappush(self._queue, item)
        return item

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
