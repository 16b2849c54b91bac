# src/foreground_task/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the channel bridge, the in-process service host and the ForegroundTask into AppState.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..connectors.channel_bridge import ChannelServiceBridge
from ..connectors.local_service import LocalServiceHost
from ..core.foreground_task import ForegroundTask
from ..core.state import AppState
from ..tasks.lifecycle_hooks import WillStartForegroundTask, WithForegroundTask

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    host = LocalServiceHost()
    task = ForegroundTask(ChannelServiceBridge(host), supported=settings.service_supported)

    # WillStartForegroundTask runs init() for us with the configured options.
    will_start = WillStartForegroundTask(
        task,
        notification_options=settings.notification_options(),
        task_options=settings.task_options(),
        notification_title=settings.notification_title,
        notification_text=settings.notification_text,
    )

    logger.debug(
        "Foreground task wired (supported=%s interval=%sms)",
        settings.service_supported,
        settings.task_interval_ms,
    )

    return AppState(
        settings=settings,
        foreground_task=task,
        service_host=host,
        will_start=will_start,
        back_guard=WithForegroundTask(task),
    )
