# src/foreground_task/tasks/lifecycle_hooks.py

from __future__ import annotations

"""
App lifecycle helpers built on top of ForegroundTask.

- WillStartForegroundTask: start the task when the app goes to the background,
  stop it when the app comes back.
- WithForegroundTask: while the task runs, a "back" action minimizes the app
  instead of closing it.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from enum import StrEnum

from ..core.foreground_task import ForegroundTask
from ..core.options import NotificationOptions, TaskOptions
from ..core.ports import TaskCallback

logger = logging.getLogger(__name__)

WillStartPredicate = Callable[[], bool | Awaitable[bool]]


class AppLifecycleState(StrEnum):
    RESUMED = "resumed"
    INACTIVE = "inactive"
    PAUSED = "paused"
    DETACHED = "detached"


class WillStartForegroundTask:
    def __init__(
        self,
        task: ForegroundTask,
        *,
        notification_options: NotificationOptions,
        notification_title: str,
        notification_text: str,
        task_options: TaskOptions | None = None,
        callback: TaskCallback | None = None,
        on_will_start: WillStartPredicate | None = None,
    ) -> None:
        self._task = task.init(notification_options, task_options)
        self._title = notification_title
        self._text = notification_text
        # May be replaced after construction (the console plugs its tick printer in here).
        self.callback = callback
        self._on_will_start = on_will_start

    async def handle_lifecycle(self, state: AppLifecycleState) -> None:
        if state == AppLifecycleState.PAUSED:
            if not await self._will_start():
                return
            if await self._task.is_running_task():
                return
            await self._task.start(self._title, self._text, self.callback)
        elif state == AppLifecycleState.RESUMED:
            await self._task.stop()

    async def _will_start(self) -> bool:
        if self._on_will_start is None:
            return True
        decision = self._on_will_start()
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)


class WithForegroundTask:
    def __init__(self, task: ForegroundTask) -> None:
        self._task = task

    async def handle_back_pressed(self) -> bool:
        """Return True if the app may close; False if it was minimized instead."""
        if await self._task.is_running_task():
            logger.debug("Back pressed while task is running: minimizing")
            await self._task.minimize_app()
            return False
        return True
