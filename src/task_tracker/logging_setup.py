# src/task_tracker/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_tracker.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console-only filter: task_tracker records pass through (the handler level
    decides), everything else, captured warnings included, needs ERROR.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "task_tracker" or record.name.startswith("task_tracker."):
            return True
        return record.levelno >= logging.ERROR


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(level: int, fmt: logging.Formatter) -> logging.Handler:
    # stderr, so task listings on stdout stay clean.
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.addFilter(_ConsoleNoiseFilter())
    return handler


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.Handler:
    handler = logging.FileHandler(str(path), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasks",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route the tracker's logs to the terminal and to <log_dir>/task_tracker.log.

    The terminal only shows task_tracker records at `console_level` and above
    (other loggers need ERROR); the log file keeps every record down to
    `file_level`. Run once from the entry point; calling it again replaces the
    handlers instead of stacking them. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)

    root.addHandler(_console_handler(console_level, fmt))
    root.addHandler(_file_handler(log_file, file_level, fmt))

    # warnings.warn() goes through 'py.warnings', which the console filter mutes below ERROR.
    logging.captureWarnings(True)
    return log_file
