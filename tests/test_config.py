# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "CONSOLE_ENABLED",
    "STORAGE_BACKEND",
    "STORAGE_KEY",
    "DATA_DIR",
    "TASKS_DB_PATH",
    "TASKS_JSON_DIR",
    "DATE_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"TASK_TRACKER_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "task-tracker"
    assert s.log_level == "INFO"
    assert s.console_enabled is True
    assert s.storage_backend == "sqlite"
    assert s.storage_key == "tasks"
    assert s.data_dir == Path(".local/task_tracker")
    assert s.tasks_db_path == Path(".local/task_tracker/tasks.sqlite3")
    assert s.tasks_json_dir == Path(".local/task_tracker")
    assert s.date_display_format == "%B %d, %Y"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASK_TRACKER_STORAGE_BACKEND", " JSON ")
    monkeypatch.setenv("TASK_TRACKER_STORAGE_KEY", "my-tasks")
    monkeypatch.setenv("TASK_TRACKER_CONSOLE_ENABLED", "no")
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "DEBUG")

    s = Settings.from_env()

    assert s.storage_backend == "json"
    assert s.storage_key == "my-tasks"
    assert s.console_enabled is False
    assert s.log_level == "DEBUG"
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.tasks_json_dir == tmp_path


def test_explicit_paths_win_over_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASK_TRACKER_TASKS_DB_PATH", str(tmp_path / "elsewhere.db"))

    s = Settings.from_env()

    assert s.tasks_db_path == tmp_path / "elsewhere.db"


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASK_TRACKER_STORAGE_BACKEND", "   ")
    monkeypatch.setenv("TASK_TRACKER_APP_NAME", "")
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", "")

    s = Settings.from_env()

    assert s.storage_backend == "sqlite"
    assert s.app_name == "task-tracker"
    assert s.data_dir == Path(".local/task_tracker")
