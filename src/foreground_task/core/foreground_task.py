# src/foreground_task/core/foreground_task.py

from __future__ import annotations

"""
Foreground task lifecycle manager.

Coordinates three things:
- start/update/stop requests against the platform service (via ServiceBridge),
- one periodic callback at a time (via PeriodicScheduler),
- guarding invalid transitions (double start, update/stop while stopped).

Running state is never cached here: the platform may kill or restart the service on its own,
so every operation asks the bridge first.
"""

import logging
from collections.abc import Callable

from ..tasks.task_scheduler import PeriodicScheduler
from .errors import AlreadyRunningError, NotInitializedError
from .options import NotificationOptions, TaskOptions
from .ports import ServiceBridge, ServicePayload, TaskCallback

logger = logging.getLogger(__name__)

CONTENT_TITLE_KEY = "notificationContentTitle"
CONTENT_TEXT_KEY = "notificationContentText"

Capability = bool | Callable[[], bool]


class ForegroundTask:
    """
    Long-lived context object; build one per process and pass it around.

    `supported` is the platform capability: when it is false every operation is a no-op
    and is_running_task() answers False without touching the bridge.
    """

    def __init__(
        self,
        bridge: ServiceBridge,
        *,
        supported: Capability = True,
        scheduler: PeriodicScheduler | None = None,
    ) -> None:
        self._bridge = bridge
        self._supported = supported
        self._scheduler = scheduler if scheduler is not None else PeriodicScheduler()

        self._notification_options: NotificationOptions | None = None
        self._task_options: TaskOptions | None = None

    # ---- Options ----

    @property
    def notification_options(self) -> NotificationOptions | None:
        return self._notification_options

    @property
    def task_options(self) -> TaskOptions:
        return self._task_options if self._task_options is not None else TaskOptions()

    @property
    def is_supported(self) -> bool:
        supported = self._supported
        return bool(supported() if callable(supported) else supported)

    @property
    def has_scheduled_callback(self) -> bool:
        return self._scheduler.is_armed

    def init(
        self,
        notification_options: NotificationOptions,
        task_options: TaskOptions | None = None,
    ) -> ForegroundTask:
        """Store options (no boundary traffic). Returns self for chaining."""
        self._notification_options = notification_options
        if task_options is not None:
            self._task_options = task_options
        elif self._task_options is None:
            self._task_options = TaskOptions()
        return self

    # ---- Lifecycle ----

    async def start(self, title: str, text: str, callback: TaskCallback | None = None) -> None:
        if not self.is_supported:
            return

        if await self._bridge.query_is_running():
            raise AlreadyRunningError()

        if self._notification_options is None:
            raise NotInitializedError()

        await self._bridge.request_start(self._build_payload(title, text))

        if callback is not None:
            self._scheduler.arm(callback, self.task_options.interval_seconds)

        logger.info("Foreground task started.")

    async def update(self, title: str, text: str, callback: TaskCallback | None = None) -> None:
        if not self.is_supported:
            return

        if not await self._bridge.query_is_running():
            logger.debug("update() skipped: task is not running")
            return

        await self._bridge.request_update(self._build_payload(title, text))

        if callback is not None:
            self._scheduler.arm(callback, self.task_options.interval_seconds)

        logger.info("Foreground task updated.")

    async def stop(self) -> None:
        if not self.is_supported:
            return

        if not await self._bridge.query_is_running():
            logger.debug("stop() skipped: task is not running")
            return

        # The timer goes down even if the stop request fails; the error still reaches the caller.
        try:
            await self._bridge.request_stop()
        finally:
            self._scheduler.disarm()

        logger.info("Foreground task stopped.")

    async def is_running_task(self) -> bool:
        if not self.is_supported:
            return False
        return bool(await self._bridge.query_is_running())

    # ---- One-shot commands ----

    async def minimize_app(self) -> None:
        """Move the app to the background without closing it."""
        if not self.is_supported:
            return
        await self._bridge.minimize_app()

    async def wake_up_screen(self) -> None:
        """Turn the screen on if it is off."""
        if not self.is_supported:
            return
        await self._bridge.wake_up_screen()

    def _build_payload(self, title: str, text: str) -> ServicePayload:
        options: ServicePayload = (
            self._notification_options.to_json() if self._notification_options is not None else {}
        )
        options[CONTENT_TITLE_KEY] = title
        options[CONTENT_TEXT_KEY] = text
        return options
