# src/foreground_task/connectors/local_service.py

from __future__ import annotations

"""
In-process stand-in for the platform side of the method channel.

Used by the console demo (and tests) where there is no real OS service:
- keeps a running flag and the last notification payload,
- counts minimize / wake commands,
- can be "killed" from outside to mimic the host OS stopping the service.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

from ..core.errors import BridgeCommunicationError
from ..core.ports import ServicePayload
from .channel_bridge import (
    IS_RUNNING_METHOD,
    MINIMIZE_METHOD,
    START_METHOD,
    STOP_METHOD,
    UPDATE_METHOD,
    WAKE_UP_METHOD,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalServiceHost:
    running: bool = False
    notification: ServicePayload = field(default_factory=dict)
    started_at: float | None = None
    minimize_count: int = 0
    wake_count: int = 0
    calls: list[str] = field(default_factory=list)

    async def invoke_method(self, method: str, arguments: ServicePayload | None = None) -> Any:
        self.calls.append(method)

        if method == IS_RUNNING_METHOD:
            return self.running

        if method in (START_METHOD, UPDATE_METHOD):
            # Like the real service: start while running just refreshes, update while stopped is ignored.
            if method == UPDATE_METHOD and not self.running:
                return None
            self.notification = dict(arguments or {})
            if not self.running:
                self.running = True
                self.started_at = time.time()
                logger.info("Service started: %s", self.notification.get("notificationContentTitle"))
            return None

        if method == STOP_METHOD:
            self._shutdown("stop requested")
            return None

        if method == MINIMIZE_METHOD:
            self.minimize_count += 1
            return None

        if method == WAKE_UP_METHOD:
            self.wake_count += 1
            return None

        raise BridgeCommunicationError(f"Unknown method: {method}", method=method)

    def stop_externally(self) -> None:
        """Simulate the host OS killing the service behind the app's back."""
        self._shutdown("killed externally")

    def _shutdown(self, reason: str) -> None:
        if self.running:
            logger.info("Service stopped (%s).", reason)
        self.running = False
        self.started_at = None
        self.notification = {}
