# tests/test_options.py

from __future__ import annotations

import dataclasses

import pytest

from foreground_task.core.options import (
    NotificationChannelImportance,
    NotificationOptions,
    NotificationPriority,
    TaskOptions,
)


def test_task_options_defaults_and_conversion() -> None:
    options = TaskOptions()
    assert options.interval == 5000
    assert options.interval_seconds == pytest.approx(5.0)
    assert options.to_json() == {"interval": 5000}


@pytest.mark.parametrize("interval", [0, -1])
def test_task_options_reject_non_positive_interval(interval: int) -> None:
    with pytest.raises(ValueError):
        TaskOptions(interval=interval)


def test_options_are_immutable() -> None:
    options = NotificationOptions(channel_id="c", channel_name="n")
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.channel_id = "other"  # type: ignore[misc]


def test_notification_options_serialize_to_boundary_keys() -> None:
    options = NotificationOptions(
        channel_id="sync",
        channel_name="Sync",
        channel_description="Background sync",
        channel_importance=NotificationChannelImportance.HIGH,
        priority=NotificationPriority.MIN,
        enable_vibration=True,
    )

    assert options.to_json() == {
        "notificationChannelId": "sync",
        "notificationChannelName": "Sync",
        "notificationChannelDescription": "Background sync",
        "notificationChannelImportance": 4,
        "notificationPriority": -2,
        "enableVibration": True,
        "playSound": False,
        "showWhen": False,
    }


def test_to_json_returns_a_fresh_map() -> None:
    options = NotificationOptions(channel_id="c", channel_name="n")
    first = options.to_json()
    first["notificationContentTitle"] = "T"
    assert "notificationContentTitle" not in options.to_json()


def test_enum_lookup_by_name_falls_back() -> None:
    low = NotificationChannelImportance.LOW
    assert NotificationChannelImportance.from_name("high", low) is NotificationChannelImportance.HIGH
    assert NotificationChannelImportance.from_name(" max ", low) is NotificationChannelImportance.MAX
    assert NotificationChannelImportance.from_name("loud", low) is low
    assert NotificationChannelImportance.from_name(None, low) is low
    assert NotificationPriority.from_name("default", NotificationPriority.LOW) is NotificationPriority.DEFAULT
    assert NotificationPriority.from_name("", NotificationPriority.LOW) is NotificationPriority.LOW
