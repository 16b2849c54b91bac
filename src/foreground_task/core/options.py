# src/foreground_task/core/options.py

"""
Option values stored by the manager.

Both classes are frozen: `init` replaces them wholesale, nothing mutates them in place.
`to_json()` produces the key-value map sent across the service boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

DEFAULT_TASK_INTERVAL_MS = 5000


class NotificationChannelImportance(IntEnum):
    """Android notification channel importance levels."""

    NONE = 0
    MIN = 1
    LOW = 2
    DEFAULT = 3
    HIGH = 4
    MAX = 5

    @classmethod
    def from_name(cls, raw: str | None, default: NotificationChannelImportance) -> NotificationChannelImportance:
        if not raw:
            return default
        try:
            return cls[raw.strip().upper()]
        except KeyError:
            return default


class NotificationPriority(IntEnum):
    """Notification priority for platforms without channels."""

    MIN = -2
    LOW = -1
    DEFAULT = 0
    HIGH = 1
    MAX = 2

    @classmethod
    def from_name(cls, raw: str | None, default: NotificationPriority) -> NotificationPriority:
        if not raw:
            return default
        try:
            return cls[raw.strip().upper()]
        except KeyError:
            return default


@dataclass(frozen=True, slots=True)
class TaskOptions:
    interval: int = DEFAULT_TASK_INTERVAL_MS  # milliseconds

    def __post_init__(self) -> None:
        if int(self.interval) <= 0:
            raise ValueError(f"interval must be positive, got {self.interval!r}")

    @property
    def interval_seconds(self) -> float:
        return self.interval / 1000.0

    def to_json(self) -> dict[str, Any]:
        return {"interval": int(self.interval)}


@dataclass(frozen=True, slots=True)
class NotificationOptions:
    """Presentation details of the persistent notification."""

    channel_id: str
    channel_name: str
    channel_description: str | None = None
    channel_importance: NotificationChannelImportance = NotificationChannelImportance.DEFAULT
    priority: NotificationPriority = NotificationPriority.DEFAULT
    enable_vibration: bool = False
    play_sound: bool = False
    show_when: bool = False

    def to_json(self) -> dict[str, Any]:
        # A fresh dict per call: callers inject title/text keys into it.
        return {
            "notificationChannelId": self.channel_id,
            "notificationChannelName": self.channel_name,
            "notificationChannelDescription": self.channel_description,
            "notificationChannelImportance": int(self.channel_importance),
            "notificationPriority": int(self.priority),
            "enableVibration": self.enable_vibration,
            "playSound": self.play_sound,
            "showWhen": self.show_when,
        }
