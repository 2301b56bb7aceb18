# src/task_tracker/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..tasks.task_models import FilterSpec
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything a front-end needs, built once by the composition root.

    The active filters belong to the front-end, not to the store.
    """

    settings: Any
    store: TaskStore
    filters: FilterSpec = field(default_factory=FilterSpec)
    today: Callable[[], date] = date.today

    # Set by /clear, consumed by /clear yes.
    clear_pending: bool = False
