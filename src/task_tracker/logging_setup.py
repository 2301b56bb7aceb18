# src/task_tracker/logging_setup.py

"""
Logging for the console app.

stderr shares the terminal with the task list, so it only shows this
package's records (at console_level and up) plus ERRORs from anywhere else.
Everything at file_level and up goes to <log_dir>/task_tracker.log.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "task_tracker.log"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class AppRecordsFilter(logging.Filter):
    """Pass records from the app's own loggers; others only at ERROR or above."""

    def __init__(self, app_logger: str = "task_tracker") -> None:
        super().__init__()
        self.app_logger = app_logger

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == self.app_logger or record.name.startswith(self.app_logger + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/task_tracker",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """Install the console and file handlers on the root logger. Returns the log file path."""
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(AppRecordsFilter())

    to_file = logging.FileHandler(log_file, encoding="utf-8")
    to_file.setLevel(file_level)

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.setLevel(min(console_level, file_level))
    for handler in (console, to_file):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # warnings.warn() -> "py.warnings" logger, which the console filter hides below ERROR
    logging.captureWarnings(True)
    return log_file
