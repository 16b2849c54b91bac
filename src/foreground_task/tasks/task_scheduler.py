# src/foreground_task/tasks/task_scheduler.py

from __future__ import annotations

"""
Periodic scheduler.

Owns a single asyncio timer handle:
- arm(callback, interval) cancels the current timer and starts a new recurring one,
- every tick calls the callback with the tick timestamp,
- disarm() cancels the timer and forgets the callback (safe to call when idle).

arm/disarm are synchronous, so on a single event loop a replacement is atomic:
no tick of the old callback can run after arm() returns.
"""

import asyncio
import inspect
import logging
from collections.abc import Callable
from datetime import datetime

from ..core.ports import TaskCallback

logger = logging.getLogger(__name__)


class PeriodicScheduler:
    def __init__(self, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._callback: TaskCallback | None = None
        self._interval_s = 0.0
        self._pending: set[asyncio.Future] = set()

    @property
    def is_armed(self) -> bool:
        return self._handle is not None

    @property
    def interval_seconds(self) -> float | None:
        return self._interval_s if self._handle is not None else None

    def arm(self, callback: TaskCallback, interval_seconds: float) -> None:
        """
        Replace the active callback. The first tick fires one interval from now.

        Must be called from a coroutine (needs the running loop).
        """
        interval_s = float(interval_seconds)
        if interval_s <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds!r}")

        loop = asyncio.get_running_loop()

        self.disarm()
        self._loop = loop
        self._callback = callback
        self._interval_s = interval_s
        self._handle = loop.call_later(interval_s, self._tick)
        logger.debug("Periodic callback armed (interval=%.3fs)", interval_s)

    def disarm(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            logger.debug("Periodic callback disarmed")
        self._handle = None
        self._callback = None
        self._loop = None

    def _tick(self) -> None:
        callback = self._callback
        loop = self._loop
        if callback is None or loop is None:
            return

        # Schedule the next tick first: a callback that re-arms or disarms wins.
        self._handle = loop.call_later(self._interval_s, self._tick)

        try:
            result = callback(self._clock())
        except Exception:
            logger.exception("Task callback failed")
            return

        if inspect.isawaitable(result):
            fut = asyncio.ensure_future(result)
            self._pending.add(fut)
            fut.add_done_callback(self._on_async_done)

    def _on_async_done(self, fut: asyncio.Future) -> None:
        self._pending.discard(fut)
        if fut.cancelled():
            return
        exc = fut.exception()
        if exc is not None:
            logger.error("Async task callback failed", exc_info=exc)
