# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from foreground_task.config import Settings
from foreground_task.core.foreground_task import ForegroundTask
from foreground_task.core.options import (
    NotificationChannelImportance,
    NotificationOptions,
    NotificationPriority,
)

from .fakes import FakeServiceBridge


@pytest.fixture()
def notification_options() -> NotificationOptions:
    return NotificationOptions(
        channel_id="test_channel",
        channel_name="Test Channel",
        channel_description="Used by tests",
        channel_importance=NotificationChannelImportance.LOW,
        priority=NotificationPriority.LOW,
    )


@pytest.fixture()
def bridge() -> FakeServiceBridge:
    return FakeServiceBridge()


@pytest.fixture()
def task(bridge: FakeServiceBridge) -> ForegroundTask:
    return ForegroundTask(bridge)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings built directly rather than from the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="foreground-task-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        service_supported=True,
        task_interval_ms=50,
        channel_id="test_channel",
        channel_name="Test Channel",
        channel_description=None,
        channel_importance=NotificationChannelImportance.LOW,
        notification_priority=NotificationPriority.LOW,
        notification_title="Default title",
        notification_text="Default text",
    )
