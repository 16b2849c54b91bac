# tests/test_lifecycle_hooks.py

from __future__ import annotations

import pytest

from foreground_task.core.foreground_task import ForegroundTask
from foreground_task.core.options import TaskOptions
from foreground_task.tasks.lifecycle_hooks import (
    AppLifecycleState,
    WillStartForegroundTask,
    WithForegroundTask,
)

from .fakes import FakeServiceBridge


def _hook(task: ForegroundTask, notification_options, **kwargs) -> WillStartForegroundTask:
    return WillStartForegroundTask(
        task,
        notification_options=notification_options,
        notification_title="Background",
        notification_text="Still working",
        **kwargs,
    )


def test_constructor_initializes_the_task(task: ForegroundTask, notification_options) -> None:
    _hook(task, notification_options, task_options=TaskOptions(interval=777))
    assert task.notification_options is notification_options
    assert task.task_options.interval == 777


@pytest.mark.asyncio
async def test_pause_starts_and_resume_stops(
    task: ForegroundTask, bridge: FakeServiceBridge, notification_options
) -> None:
    hook = _hook(task, notification_options, callback=lambda _ts: None)

    await hook.handle_lifecycle(AppLifecycleState.PAUSED)
    assert bridge.running
    assert task.has_scheduled_callback
    start_payload = bridge.requests[0].options
    assert start_payload is not None
    assert start_payload["notificationContentTitle"] == "Background"

    await hook.handle_lifecycle(AppLifecycleState.RESUMED)
    assert not bridge.running
    assert not task.has_scheduled_callback
    assert bridge.request_names == ["request_start", "request_stop"]


@pytest.mark.asyncio
async def test_inactive_and_detached_do_nothing(
    task: ForegroundTask, bridge: FakeServiceBridge, notification_options
) -> None:
    hook = _hook(task, notification_options)
    await hook.handle_lifecycle(AppLifecycleState.INACTIVE)
    await hook.handle_lifecycle(AppLifecycleState.DETACHED)
    assert bridge.requests == []


@pytest.mark.asyncio
async def test_pause_respects_will_start_predicate(
    task: ForegroundTask, bridge: FakeServiceBridge, notification_options
) -> None:
    async def never() -> bool:
        return False

    hook = _hook(task, notification_options, on_will_start=never)
    await hook.handle_lifecycle(AppLifecycleState.PAUSED)
    assert bridge.requests == []

    hook = _hook(task, notification_options, on_will_start=lambda: True)
    await hook.handle_lifecycle(AppLifecycleState.PAUSED)
    assert bridge.request_names == ["request_start"]


@pytest.mark.asyncio
async def test_pause_while_running_does_not_raise(
    task: ForegroundTask, bridge: FakeServiceBridge, notification_options
) -> None:
    hook = _hook(task, notification_options)
    bridge.running = True

    await hook.handle_lifecycle(AppLifecycleState.PAUSED)
    assert bridge.requests == []


@pytest.mark.asyncio
async def test_back_press_minimizes_while_running(task: ForegroundTask, bridge: FakeServiceBridge) -> None:
    guard = WithForegroundTask(task)

    assert await guard.handle_back_pressed() is True
    assert bridge.requests == []

    bridge.running = True
    assert await guard.handle_back_pressed() is False
    assert bridge.request_names == ["minimize_app"]
