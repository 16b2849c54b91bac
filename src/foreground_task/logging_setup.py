# src/foreground_task/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console thresholds per logger prefix; longest matching prefix wins.
# The emulated platform service logs every start/stop, which is file material.
CONSOLE_THRESHOLDS: dict[str, int] = {
    "foreground_task": logging.NOTSET,
    "foreground_task.connectors.local_service": logging.WARNING,
}
FOREIGN_THRESHOLD = logging.ERROR  # py.warnings, asyncio and anything else


class _PrefixLevelFilter(logging.Filter):
    def __init__(self, thresholds: Mapping[str, int], default: int) -> None:
        super().__init__()
        # Longest first so the most specific prefix is found first.
        self._thresholds = sorted(thresholds.items(), key=lambda kv: len(kv[0]), reverse=True)
        self._default = default

    def _threshold_for(self, name: str) -> int:
        for prefix, level in self._thresholds:
            if name == prefix or name.startswith(prefix + "."):
                return level
        return self._default

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= self._threshold_for(record.name)


def _console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(_PrefixLevelFilter(CONSOLE_THRESHOLDS, FOREIGN_THRESHOLD))
    return handler


def _file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/foreground_task",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    log_file_name: str = "foreground_task.log",
) -> Path:
    """
    Route all logging to a filtered stderr console and a full log file.

    Replaces whatever handlers the root logger had, so call it once at startup.
    Returns the log file path.
    """
    log_path = Path(log_dir) / log_file_name
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.addHandler(_console_handler(console_level, formatter))
    root.addHandler(_file_handler(log_path, file_level, formatter))

    logging.captureWarnings(True)
    return log_path
