# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class StatusFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class PriorityFilter(StrEnum):
    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DeadlineStatus(StrEnum):
    """Derived, never persisted."""

    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    NONE = "none"


class ChangeKind(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    TOGGLED = "toggled"
    DELETED = "deleted"
    CLEARED = "cleared"
    LOADED = "loaded"


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    Only TaskStore mutates the instances it owns; everything handed out
    by the store is a copy.
    """

    id: int
    text: str
    due_date: date
    priority: Priority
    completed: bool = False

    def copy(self) -> Task:
        return replace(self)


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Active search text + status filter + priority filter (owned by the UI)."""

    search_text: str = ""
    status: StatusFilter = StatusFilter.ALL
    priority: PriorityFilter = PriorityFilter.ALL

    def is_default(self) -> bool:
        return self == FilterSpec()


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    completed: int
    pending: int


@dataclass(frozen=True, slots=True)
class TaskChange:
    """Notification emitted by TaskStore after a successful mutation."""

    kind: ChangeKind
    task_id: int | None = None
    persisted: bool = True
