# src/task_tracker/tasks/filters.py

from __future__ import annotations

from collections.abc import Iterable

from .task_models import FilterSpec, PriorityFilter, StatusFilter, Task, TaskCounts


def matches(task: Task, spec: FilterSpec) -> bool:
    """Search AND status AND priority."""
    needle = spec.search_text.casefold()
    if needle and needle not in task.text.casefold():
        return False

    if spec.status == StatusFilter.COMPLETED and not task.completed:
        return False
    if spec.status == StatusFilter.PENDING and task.completed:
        return False

    # Priority and PriorityFilter are both StrEnums: compare by value.
    if spec.priority != PriorityFilter.ALL and task.priority != spec.priority:
        return False

    return True


def apply_filters(tasks: Iterable[Task], spec: FilterSpec) -> list[Task]:
    """Visible subset, in the order the tasks were given."""
    return [t for t in tasks if matches(t, spec)]


def count_tasks(tasks: Iterable[Task]) -> TaskCounts:
    """Counters over the whole collection; filters never apply here."""
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
    return TaskCounts(total=total, completed=completed, pending=total - completed)
