# tests/test_deadline_and_filters.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from task_tracker.tasks.deadline import classify, classify_task
from task_tracker.tasks.filters import apply_filters, count_tasks, matches
from task_tracker.tasks.task_models import (
    DeadlineStatus,
    FilterSpec,
    Priority,
    PriorityFilter,
    StatusFilter,
    Task,
)

TODAY = date(2024, 6, 10)


@pytest.mark.parametrize(
    ("due", "expected"),
    [
        (date(2024, 6, 9), DeadlineStatus.OVERDUE),
        (date(2024, 1, 1), DeadlineStatus.OVERDUE),
        (date(2024, 6, 10), DeadlineStatus.DUE_SOON),
        (date(2024, 6, 11), DeadlineStatus.DUE_SOON),
        (date(2024, 6, 12), DeadlineStatus.NONE),
        (date(2025, 6, 10), DeadlineStatus.NONE),
    ],
)
def test_deadline_boundaries(due: date, expected: DeadlineStatus) -> None:
    assert classify(due, False, TODAY) is expected


@pytest.mark.parametrize("due", [date(2024, 6, 9), date(2024, 6, 10), date(2024, 6, 11), date(2024, 6, 12)])
def test_completed_tasks_have_no_deadline_warning(due: date) -> None:
    assert classify(due, True, TODAY) is DeadlineStatus.NONE


def test_today_time_of_day_is_ignored() -> None:
    late_evening = datetime(2024, 6, 10, 23, 59)
    assert classify(date(2024, 6, 10), False, late_evening) is DeadlineStatus.DUE_SOON
    assert classify(date(2024, 6, 9), False, late_evening) is DeadlineStatus.OVERDUE
    assert classify(date(2024, 6, 12), False, late_evening) is DeadlineStatus.NONE


def test_deadline_status_values() -> None:
    assert DeadlineStatus.DUE_SOON.value == "due-soon"
    assert classify_task(Task(1, "x", date(2024, 6, 11), Priority.LOW), TODAY) == "due-soon"


def _tasks() -> list[Task]:
    return [
        Task(1, "Buy milk", date(2024, 6, 12), Priority.LOW),
        Task(2, "Pay rent", date(2024, 6, 9), Priority.HIGH, completed=True),
        Task(3, "Call the PAYROLL office", date(2024, 6, 11), Priority.MEDIUM),
        Task(4, "Water plants", date(2024, 6, 20), Priority.HIGH),
    ]


def test_default_spec_matches_everything() -> None:
    tasks = _tasks()
    assert apply_filters(tasks, FilterSpec()) == tasks


def test_search_is_case_insensitive_substring() -> None:
    visible = apply_filters(_tasks(), FilterSpec(search_text="PAY"))
    assert [t.id for t in visible] == [2, 3]


def test_status_filter() -> None:
    tasks = _tasks()
    assert [t.id for t in apply_filters(tasks, FilterSpec(status=StatusFilter.COMPLETED))] == [2]
    assert [t.id for t in apply_filters(tasks, FilterSpec(status=StatusFilter.PENDING))] == [1, 3, 4]


def test_priority_filter() -> None:
    visible = apply_filters(_tasks(), FilterSpec(priority=PriorityFilter.HIGH))
    assert [t.id for t in visible] == [2, 4]


def test_predicates_are_combined_with_and() -> None:
    spec = FilterSpec(search_text="a", status=StatusFilter.PENDING, priority=PriorityFilter.HIGH)
    assert [t.id for t in apply_filters(_tasks(), spec)] == [4]
    assert not matches(_tasks()[1], spec)


def test_filter_result_is_ordered_subsequence() -> None:
    tasks = _tasks()
    specs = [
        FilterSpec(search_text=s, status=st, priority=p)
        for s in ("", "a", "zzz")
        for st in StatusFilter
        for p in PriorityFilter
    ]
    for spec in specs:
        visible = apply_filters(tasks, spec)
        positions = [tasks.index(t) for t in visible]
        assert positions == sorted(positions)


def test_counts_ignore_filters() -> None:
    tasks = _tasks()
    counts = count_tasks(tasks)
    assert (counts.total, counts.completed, counts.pending) == (4, 1, 3)

    filtered = apply_filters(tasks, FilterSpec(status=StatusFilter.COMPLETED))
    assert len(filtered) == 1
    assert count_tasks(tasks) == counts


def test_counts_of_empty_collection() -> None:
    counts = count_tasks([])
    assert (counts.total, counts.completed, counts.pending) == (0, 0, 0)


def test_filter_spec_is_default() -> None:
    assert FilterSpec().is_default()
    assert not FilterSpec(search_text="x").is_default()
