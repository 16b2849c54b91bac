# src/foreground_task/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The manager depends on Protocols instead of concrete implementations.
This keeps the platform side swappable and makes testing easier.
"""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, Protocol

ServicePayload = dict[str, Any]
# Serialized notification options plus notificationContentTitle / notificationContentText.

TaskCallback = Callable[[datetime], Any]
# Called with the tick timestamp. May return an awaitable; it is then scheduled on the loop.


class ServiceBridge(Protocol):
    """
    Boundary to the platform's long-running service.

    start/update/stop/minimize/wake are fire-and-forget on the platform side;
    they are still coroutines so an implementation can surface boundary errors.
    query_is_running is the authoritative running-state signal.
    """

    def request_start(self, options: ServicePayload) -> Awaitable[None]: ...
    def request_update(self, options: ServicePayload) -> Awaitable[None]: ...
    def request_stop(self) -> Awaitable[None]: ...
    def query_is_running(self) -> Awaitable[bool]: ...
    def minimize_app(self) -> Awaitable[None]: ...
    def wake_up_screen(self) -> Awaitable[None]: ...


class MethodChannel(Protocol):
    """Named-method transport to the platform side (one call, one optional reply)."""

    def invoke_method(self, method: str, arguments: ServicePayload | None = None) -> Awaitable[Any]: ...
