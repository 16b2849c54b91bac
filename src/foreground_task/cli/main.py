# src/foreground_task/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL on an asyncio loop.
On exit the foreground task is stopped so no timer outlives the loop.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def _shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        await state.foreground_task.stop()
    except Exception:
        logger.exception("Failed to stop the foreground task.")


async def _run(state: AppState) -> None:
    try:
        await run_console_loop(state)
    finally:
        await _shutdown(state)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_path = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_path)

    state = create_initial_state(settings=settings)

    try:
        asyncio.run(_run(state))
    except KeyboardInterrupt:
        logger.info("Interrupted.")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
