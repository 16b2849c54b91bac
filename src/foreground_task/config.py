# src/foreground_task/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .core.options import (
    DEFAULT_TASK_INTERVAL_MS,
    NotificationChannelImportance,
    NotificationOptions,
    NotificationPriority,
    TaskOptions,
)

ENV_PREFIX = "FGTASK"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Platform ----
    service_supported: bool

    # ---- Task ----
    task_interval_ms: int

    # ---- Notification channel ----
    channel_id: str
    channel_name: str
    channel_description: str | None
    channel_importance: NotificationChannelImportance
    notification_priority: NotificationPriority

    # ---- Default notification content ----
    notification_title: str
    notification_text: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "foreground-task").strip() or "foreground-task"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/foreground_task"))

        service_supported = _env_bool(_k("SERVICE_SUPPORTED"), True)

        task_interval_ms = _env_int(_k("TASK_INTERVAL_MS"), DEFAULT_TASK_INTERVAL_MS)
        if task_interval_ms <= 0:
            task_interval_ms = DEFAULT_TASK_INTERVAL_MS

        channel_id = _env(_k("CHANNEL_ID"), "foreground_service").strip() or "foreground_service"
        channel_name = (
            _env(_k("CHANNEL_NAME"), "Foreground Service Notification").strip()
            or "Foreground Service Notification"
        )
        channel_description = _env(_k("CHANNEL_DESCRIPTION"), "").strip() or None
        channel_importance = NotificationChannelImportance.from_name(
            os.getenv(_k("CHANNEL_IMPORTANCE")), NotificationChannelImportance.LOW
        )
        notification_priority = NotificationPriority.from_name(
            os.getenv(_k("NOTIFICATION_PRIORITY")), NotificationPriority.LOW
        )

        notification_title = _env(_k("NOTIFICATION_TITLE"), "Foreground Service is running")
        notification_text = _env(_k("NOTIFICATION_TEXT"), "Tap to return to the app")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            service_supported=service_supported,
            task_interval_ms=task_interval_ms,
            channel_id=channel_id,
            channel_name=channel_name,
            channel_description=channel_description,
            channel_importance=channel_importance,
            notification_priority=notification_priority,
            notification_title=notification_title,
            notification_text=notification_text,
        )

    def notification_options(self) -> NotificationOptions:
        return NotificationOptions(
            channel_id=self.channel_id,
            channel_name=self.channel_name,
            channel_description=self.channel_description,
            channel_importance=self.channel_importance,
            priority=self.notification_priority,
        )

    def task_options(self) -> TaskOptions:
        return TaskOptions(interval=self.task_interval_ms)


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once per process."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
