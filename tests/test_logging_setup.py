# tests/test_logging_setup.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from task_tracker.logging_setup import AppRecordsFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("name", "level", "passes"),
    [
        ("task_tracker", logging.DEBUG, True),
        ("task_tracker.tasks.task_store", logging.INFO, True),
        ("task_tracker_extra", logging.INFO, False),
        ("urllib3.connectionpool", logging.INFO, False),
        ("urllib3.connectionpool", logging.ERROR, True),
        ("py.warnings", logging.WARNING, False),
    ],
)
def test_console_filter_keeps_app_records(name: str, level: int, passes: bool) -> None:
    assert AppRecordsFilter().filter(_record(name, level)) is passes


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_writes_everything_to_file(tmp_path: Path) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("task_tracker.demo").debug("app detail")
    logging.getLogger("somelib").info("library chatter")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file == tmp_path / "logs" / "task_tracker.log"
    text = log_file.read_text("utf-8")
    assert "task_tracker.demo: app detail" in text
    assert "somelib: library chatter" in text
    assert len(logging.getLogger().handlers) == 2
