# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "FGTASK_APP_NAME": "App display name (default: foreground-task).",
    "FGTASK_LOG_LEVEL": "Console logging level (default: INFO).",
    "FGTASK_DATA_DIR": "Local data directory for logs (default: .local/foreground_task).",
    # Platform
    "FGTASK_SERVICE_SUPPORTED": "Whether the foreground service is available (true/false, default: true).",
    # Task
    "FGTASK_TASK_INTERVAL_MS": "Periodic callback interval in milliseconds (default: 5000).",
    # Notification channel
    "FGTASK_CHANNEL_ID": "Notification channel id (default: foreground_service).",
    "FGTASK_CHANNEL_NAME": "Notification channel name (default: Foreground Service Notification).",
    "FGTASK_CHANNEL_DESCRIPTION": "Optional channel description.",
    "FGTASK_CHANNEL_IMPORTANCE": "NONE | MIN | LOW | DEFAULT | HIGH | MAX (default: LOW).",
    "FGTASK_NOTIFICATION_PRIORITY": "MIN | LOW | DEFAULT | HIGH | MAX (default: LOW).",
    # Notification content
    "FGTASK_NOTIFICATION_TITLE": "Default notification title for /start.",
    "FGTASK_NOTIFICATION_TEXT": "Default notification text for /start.",
}
