# src/foreground_task/__init__.py

"""Foreground task lifecycle manager with a single periodic callback."""

from __future__ import annotations

from .connectors.channel_bridge import ChannelServiceBridge
from .connectors.local_service import LocalServiceHost
from .core.errors import (
    AlreadyRunningError,
    BridgeCommunicationError,
    ForegroundTaskError,
    NotInitializedError,
)
from .core.foreground_task import ForegroundTask
from .core.options import (
    NotificationChannelImportance,
    NotificationOptions,
    NotificationPriority,
    TaskOptions,
)
from .core.ports import MethodChannel, ServiceBridge, TaskCallback
from .tasks.lifecycle_hooks import AppLifecycleState, WillStartForegroundTask, WithForegroundTask
from .tasks.task_scheduler import PeriodicScheduler

__all__ = [
    "AlreadyRunningError",
    "AppLifecycleState",
    "BridgeCommunicationError",
    "ChannelServiceBridge",
    "ForegroundTask",
    "ForegroundTaskError",
    "LocalServiceHost",
    "MethodChannel",
    "NotInitializedError",
    "NotificationChannelImportance",
    "NotificationOptions",
    "NotificationPriority",
    "PeriodicScheduler",
    "ServiceBridge",
    "TaskCallback",
    "TaskOptions",
    "WillStartForegroundTask",
    "WithForegroundTask",
]
