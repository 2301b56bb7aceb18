# src/task_tracker/cli/render.py

"""Plain-text rendering of tasks for the console front-end."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ..tasks.deadline import classify_task
from ..tasks.task_models import DeadlineStatus, FilterSpec, Task, TaskCounts

DEFAULT_DATE_FORMAT = "%B %d, %Y"

PRIORITY_LABELS = {"low": "Low", "medium": "Medium", "high": "High"}
DEADLINE_LABELS = {
    DeadlineStatus.OVERDUE: "(Overdue)",
    DeadlineStatus.DUE_SOON: "(Due Soon)",
}


def format_due_date(due: date, fmt: str = DEFAULT_DATE_FORMAT) -> str:
    if fmt == DEFAULT_DATE_FORMAT:
        # unpadded day: "June 9, 2024"
        return f"{due:%B} {due.day}, {due.year}"
    return due.strftime(fmt)


def render_task(task: Task, today: date, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    box = "[x]" if task.completed else "[ ]"
    line = f"{box} #{task.id} {task.text} | {format_due_date(task.due_date, date_format)}"
    warning = DEADLINE_LABELS.get(classify_task(task, today))
    if warning:
        line += f" {warning}"
    return f"{line} | {PRIORITY_LABELS[task.priority.value]}"


def render_counts(counts: TaskCounts) -> str:
    return f"Total: {counts.total}  Completed: {counts.completed}  Pending: {counts.pending}"


def render_filters(spec: FilterSpec) -> str:
    search = f'"{spec.search_text}"' if spec.search_text else "-"
    return f"Filters: search={search} status={spec.status.value} priority={spec.priority.value}"


def render_view(
    visible: Sequence[Task],
    counts: TaskCounts,
    spec: FilterSpec,
    today: date,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """Task list (already filtered) followed by counters over the whole store."""
    lines: list[str] = []
    if counts.total == 0:
        lines.append("No tasks yet. Add one with /add YYYY-MM-DD [priority] <text>.")
    else:
        if not spec.is_default():
            lines.append(render_filters(spec))
        if visible:
            lines.extend(render_task(t, today, date_format) for t in visible)
        else:
            lines.append("No tasks match the current filters.")
    lines.append(render_counts(counts))
    return "\n".join(lines)
