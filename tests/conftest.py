# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.storage.memory import MemoryStorage
from task_tracker.tasks.task_store import TaskStore

from .fakes import FakeClock

TODAY = date(2024, 6, 10)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        console_enabled=True,
        storage_backend="memory",
        storage_key="tasks",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        tasks_json_dir=tmp_path / "json",
        date_display_format="%B %d, %Y",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with an in-memory store and a fixed 'today'."""
    return AppState(settings=settings, store=store, today=lambda: TODAY)
