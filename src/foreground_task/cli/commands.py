# src/foreground_task/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..core.errors import ForegroundTaskError
from ..core.options import TaskOptions
from ..core.ports import TaskCallback
from ..core.state import AppState
from ..tasks.lifecycle_hooks import AppLifecycleState

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, list[str], CommandEmitter | None], str | Awaitable[str]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /start, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        Handlers may be plain functions or coroutines.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        reply = handler(state, args, emit)
        if inspect.isawaitable(reply):
            reply = await reply
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def make_tick_callback(state: AppState, emit: CommandEmitter | None) -> TaskCallback:
    """Task callback for the demo: count ticks and echo them."""

    def _on_tick(timestamp: datetime) -> None:
        state.tick_count += 1
        state.last_tick = timestamp.strftime("%H:%M:%S")
        if emit:
            emit(f"[TASK] tick #{state.tick_count} at {state.last_tick}")

    return _on_tick


def _title_and_text(state: AppState, args: list[str]) -> tuple[str, str]:
    """Parse "title | text"; missing parts fall back to the configured defaults."""
    settings = state.settings
    title = str(getattr(settings, "notification_title", ""))
    text = str(getattr(settings, "notification_text", ""))

    raw = " ".join(args).strip()
    if raw:
        head, sep, tail = raw.partition("|")
        title = head.strip() or title
        if sep:
            text = tail.strip() or text
    return title, text


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


async def cmd_status(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = state.foreground_task
    running = await task.is_running_task()
    notification = state.service_host.notification
    lines = [
        "Status:",
        f"  Platform supported: {'yes' if task.is_supported else 'no'}",
        f"  Running: {'yes' if running else 'no'}",
        f"  Interval: {task.task_options.interval} ms",
        f"  Callback armed: {'yes' if task.has_scheduled_callback else 'no'}",
        f"  Ticks: {state.tick_count} (last: {state.last_tick or '-'})",
    ]
    if running:
        lines.append(
            f"  Notification: {notification.get('notificationContentTitle')} / "
            f"{notification.get('notificationContentText')}"
        )
    return "\n".join(lines)


async def cmd_start(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /start                -> start with the configured title/text
    /start Title | Text   -> start with a custom title/text
    """
    title, text = _title_and_text(state, args)
    try:
        await state.foreground_task.start(title, text, make_tick_callback(state, emit))
    except ForegroundTaskError as e:
        return f"Cannot start: {e}"
    return f"Started: {title} / {text}"


async def cmd_update(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = state.foreground_task
    if not await task.is_running_task():
        return "Task is not running; nothing to update."
    title, text = _title_and_text(state, args)
    await task.update(title, text)
    return f"Updated: {title} / {text}"


async def cmd_stop(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    task = state.foreground_task
    if not await task.is_running_task():
        return "Task is not running."
    await task.stop()
    return "Stopped."


async def cmd_interval(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /interval        -> show the interval
    /interval <ms>   -> set a new interval (re-arms the callback if the task runs)
    """
    task = state.foreground_task
    if not args:
        return f"Interval is {task.task_options.interval} ms. Use /interval <ms> to change it."

    try:
        options = TaskOptions(interval=int(args[0]))
    except ValueError:
        return "Usage: /interval <positive milliseconds>."

    if task.notification_options is None:
        return "Not initialized."
    task.init(task.notification_options, options)

    if await task.is_running_task():
        title, text = _title_and_text(state, [])
        notification = state.service_host.notification
        title = str(notification.get("notificationContentTitle") or title)
        text = str(notification.get("notificationContentText") or text)
        await task.update(title, text, make_tick_callback(state, emit))
        return f"Interval set to {options.interval} ms (callback re-armed)."
    return f"Interval set to {options.interval} ms."


async def cmd_minimize(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    await state.foreground_task.minimize_app()
    return "Minimize requested."


async def cmd_wake(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    await state.foreground_task.wake_up_screen()
    return "Wake-up requested."


async def cmd_pause(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    await state.will_start.handle_lifecycle(AppLifecycleState.PAUSED)
    running = await state.foreground_task.is_running_task()
    return f"App paused (task running: {'yes' if running else 'no'})."


async def cmd_resume(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    await state.will_start.handle_lifecycle(AppLifecycleState.RESUMED)
    running = await state.foreground_task.is_running_task()
    return f"App resumed (task running: {'yes' if running else 'no'})."


async def cmd_back(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    may_close = await state.back_guard.handle_back_pressed()
    if may_close:
        return "Back pressed: the app may close."
    return "Back pressed: task is running, app minimized instead."


def cmd_kill(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """Simulate the host OS killing the service (the local timer keeps its state)."""
    state.service_host.stop_externally()
    return "Service killed externally."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task state.")
registry.register("start", cmd_start, help_text="Start the task: /start [title | text].")
registry.register("update", cmd_update, help_text="Update the notification: /update [title | text].")
registry.register("stop", cmd_stop, help_text="Stop the task.")
registry.register("interval", cmd_interval, help_text="Show or set the task interval: /interval [ms].")
registry.register("minimize", cmd_minimize, help_text="Minimize the app.")
registry.register("wake", cmd_wake, help_text="Wake up the screen.")
registry.register("pause", cmd_pause, help_text="Simulate the app going to background.")
registry.register("resume", cmd_resume, help_text="Simulate the app coming back.")
registry.register("back", cmd_back, help_text="Simulate a back press.")
registry.register("kill", cmd_kill, help_text="Simulate the OS killing the service.")
