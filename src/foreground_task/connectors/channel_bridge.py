# src/foreground_task/connectors/channel_bridge.py

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import BridgeCommunicationError
from ..core.ports import MethodChannel, ServicePayload

logger = logging.getLogger(__name__)

START_METHOD = "startForegroundService"
UPDATE_METHOD = "updateForegroundService"
STOP_METHOD = "stopForegroundService"
IS_RUNNING_METHOD = "isRunningService"
MINIMIZE_METHOD = "minimizeApp"
WAKE_UP_METHOD = "wakeUpScreen"


class ChannelServiceBridge:
    """
    ServiceBridge over a MethodChannel.

    Each operation is one named call. Transport failures come back as
    BridgeCommunicationError (original exception chained), nothing is retried.
    """

    def __init__(self, channel: MethodChannel) -> None:
        self._channel = channel

    async def request_start(self, options: ServicePayload) -> None:
        await self._invoke(START_METHOD, options)

    async def request_update(self, options: ServicePayload) -> None:
        await self._invoke(UPDATE_METHOD, options)

    async def request_stop(self) -> None:
        await self._invoke(STOP_METHOD)

    async def query_is_running(self) -> bool:
        reply = await self._invoke(IS_RUNNING_METHOD)
        if not isinstance(reply, bool):
            raise BridgeCommunicationError(
                f"{IS_RUNNING_METHOD} returned {type(reply).__name__}, expected bool",
                method=IS_RUNNING_METHOD,
            )
        return reply

    async def minimize_app(self) -> None:
        await self._invoke(MINIMIZE_METHOD)

    async def wake_up_screen(self) -> None:
        await self._invoke(WAKE_UP_METHOD)

    async def _invoke(self, method: str, arguments: ServicePayload | None = None) -> Any:
        logger.debug("invoke %s", method)
        try:
            return await self._channel.invoke_method(method, arguments)
        except BridgeCommunicationError:
            raise
        except Exception as e:
            raise BridgeCommunicationError(f"{method} failed: {e!r}", method=method) from e
