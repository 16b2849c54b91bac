# src/foreground_task/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from datetime import datetime

from ..cli.commands import make_tick_callback
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def _start_stdin_reader(loop: asyncio.AbstractEventLoop, lines: asyncio.Queue[str | None]) -> threading.Thread:
    """
    Read stdin on a daemon thread and hand lines to the loop (None means EOF).

    A daemon thread is not joined at exit, so Ctrl+C does not wait for a pending readline.
    """

    def _deliver(item: str | None) -> bool:
        try:
            loop.call_soon_threadsafe(lines.put_nowait, item)
        except RuntimeError:
            # Loop already closed: nobody is listening any more.
            return False
        return True

    def _reader() -> None:
        while True:
            print(PROMPT, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                _deliver(None)
                return
            if not _deliver(line):
                return

    thread = threading.Thread(target=_reader, name="console-stdin", daemon=True)
    thread.start()
    return thread


async def run_console_loop(state: AppState) -> None:
    """
    Interactive REPL driving the foreground task.

    Timer ticks keep firing on the loop while we wait for input.
    Ctrl+C arrives as cancellation of the main task (asyncio.run handles SIGINT),
    so it propagates out of here and cli.main stops the task.
    """
    logger.info("Console connector started (supported=%s).", state.foreground_task.is_supported)
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    state.will_start.callback = make_tick_callback(state, _print_ts)

    lines: asyncio.Queue[str | None] = asyncio.Queue()
    _start_stdin_reader(asyncio.get_running_loop(), lines)

    while True:
        raw = await lines.get()
        if raw is None:
            logger.info("Console EOF received, exiting.")
            break

        user_input = raw.strip()
        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = await command_registry.handle(state, user_input, emit=_print_ts)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            _print_ts("Not a command. Use /help to list available commands.")
            continue

        _print_ts(cmd_response)

    logger.info("Console connector finished.")
