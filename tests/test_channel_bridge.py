# tests/test_channel_bridge.py

from __future__ import annotations

import pytest

from foreground_task.connectors.channel_bridge import ChannelServiceBridge
from foreground_task.connectors.local_service import LocalServiceHost
from foreground_task.core.errors import AlreadyRunningError, BridgeCommunicationError
from foreground_task.core.foreground_task import ForegroundTask

from .fakes import FakeChannel


@pytest.mark.asyncio
async def test_operations_map_to_method_names() -> None:
    channel = FakeChannel(replies={"isRunningService": False})
    bridge = ChannelServiceBridge(channel)

    await bridge.request_start({"a": 1})
    await bridge.request_update({"b": 2})
    await bridge.request_stop()
    assert await bridge.query_is_running() is False
    await bridge.minimize_app()
    await bridge.wake_up_screen()

    assert channel.invocations == [
        ("startForegroundService", {"a": 1}),
        ("updateForegroundService", {"b": 2}),
        ("stopForegroundService", None),
        ("isRunningService", None),
        ("minimizeApp", None),
        ("wakeUpScreen", None),
    ]


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped() -> None:
    cause = ConnectionResetError("pipe closed")
    bridge = ChannelServiceBridge(FakeChannel(error=cause))

    with pytest.raises(BridgeCommunicationError) as exc_info:
        await bridge.request_stop()

    assert exc_info.value.method == "stopForegroundService"
    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_bridge_error_is_not_rewrapped() -> None:
    original = BridgeCommunicationError("no service", method="isRunningService")
    bridge = ChannelServiceBridge(FakeChannel(error=original))

    with pytest.raises(BridgeCommunicationError) as exc_info:
        await bridge.query_is_running()

    assert exc_info.value is original


@pytest.mark.asyncio
async def test_non_bool_running_reply_is_rejected() -> None:
    bridge = ChannelServiceBridge(FakeChannel(replies={"isRunningService": None}))
    with pytest.raises(BridgeCommunicationError):
        await bridge.query_is_running()


@pytest.mark.asyncio
async def test_local_host_end_to_end(notification_options) -> None:
    host = LocalServiceHost()
    task = ForegroundTask(ChannelServiceBridge(host)).init(notification_options)

    await task.start("Working", "Step 1")
    assert host.running
    assert host.notification["notificationContentTitle"] == "Working"

    await task.update("Working", "Step 2")
    assert host.notification["notificationContentText"] == "Step 2"

    with pytest.raises(AlreadyRunningError):
        await task.start("Working", "again")

    await task.minimize_app()
    await task.wake_up_screen()
    assert (host.minimize_count, host.wake_count) == (1, 1)

    await task.stop()
    assert not host.running
    assert host.notification == {}


@pytest.mark.asyncio
async def test_local_host_external_kill_is_observed(notification_options) -> None:
    host = LocalServiceHost()
    task = ForegroundTask(ChannelServiceBridge(host)).init(notification_options)

    await task.start("T", "X")
    host.stop_externally()

    assert await task.is_running_task() is False
    host.calls.clear()
    await task.stop()
    assert host.calls == ["isRunningService"]


@pytest.mark.asyncio
async def test_local_host_rejects_unknown_method() -> None:
    host = LocalServiceHost()
    with pytest.raises(BridgeCommunicationError) as exc_info:
        await host.invoke_method("rebootDevice")
    assert exc_info.value.method == "rebootDevice"


@pytest.mark.asyncio
async def test_local_host_ignores_update_while_stopped() -> None:
    host = LocalServiceHost()
    await host.invoke_method("updateForegroundService", {"notificationContentTitle": "T"})
    assert not host.running
    assert host.notification == {}
