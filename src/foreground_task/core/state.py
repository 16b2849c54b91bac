# src/foreground_task/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..connectors.local_service import LocalServiceHost
from ..tasks.lifecycle_hooks import WillStartForegroundTask, WithForegroundTask
from .foreground_task import ForegroundTask


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    foreground_task: ForegroundTask
    service_host: LocalServiceHost
    will_start: WillStartForegroundTask
    back_guard: WithForegroundTask

    tick_count: int = 0
    last_tick: str | None = None
