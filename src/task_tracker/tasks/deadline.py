# src/task_tracker/tasks/deadline.py

from __future__ import annotations

from datetime import date, datetime

from .task_models import DeadlineStatus, Task

DUE_SOON_DAYS = 2


def _as_date(value: date) -> date:
    # datetime is a date subclass; drop the time of day.
    return value.date() if isinstance(value, datetime) else value


def classify(due_date: date, completed: bool, today: date) -> DeadlineStatus:
    """
    Deadline warning for a task relative to `today`.

    - completed -> none
    - due before today -> overdue
    - due today or tomorrow -> due-soon
    - otherwise -> none

    Pure: `today` always comes from the caller.
    """
    if completed:
        return DeadlineStatus.NONE

    due = _as_date(due_date)
    day = _as_date(today)

    if due < day:
        return DeadlineStatus.OVERDUE
    if (due - day).days < DUE_SOON_DAYS:
        return DeadlineStatus.DUE_SOON
    return DeadlineStatus.NONE


def classify_task(task: Task, today: date) -> DeadlineStatus:
    return classify(task.due_date, task.completed, today)
