# src/task_tracker/tasks/task_codec.py

"""
Text encoding of the task collection.

The payload is a JSON object holding the highest id ever issued and the
tasks in collection order:

    {"lastId": 1718000000000,
     "tasks": [{"id": 1718000000000, "text": "Buy milk", "dueDate": "2024-06-12",
                "priority": "low", "completed": false}, ...]}

lastId survives deletes, so ids are never handed out twice across restarts.
A bare array of tasks (the older layout) still loads.

Keys stay camelCase (dueDate) so existing stored payloads keep loading
unchanged.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from ..core.errors import PersistenceError, ValidationError
from .task_models import Priority, Task

logger = logging.getLogger(__name__)


def parse_due_date(raw: Any) -> date:
    """
    Normalize a due date to a calendar date.

    Accepts a date, a datetime (time-of-day dropped) or an ISO "YYYY-MM-DD" string.
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            return date.fromisoformat(raw.strip())
        except ValueError:
            raise ValidationError(f"Invalid due date: {raw!r}.", field="due_date") from None
    raise ValidationError("Due date must be filled.", field="due_date")


def parse_priority(raw: Any) -> Priority:
    if isinstance(raw, Priority):
        return raw
    if isinstance(raw, str):
        try:
            return Priority(raw.strip().lower())
        except ValueError:
            pass
    raise ValidationError(f"Invalid priority: {raw!r}.", field="priority")


def normalize_text(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError("Task name cannot be empty.", field="text")
    return raw.strip()


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "dueDate": task.due_date.isoformat(),
        "priority": task.priority.value,
        "completed": task.completed,
    }


def _parse_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError("boolean id")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    raise ValueError(f"bad id {raw!r}")


def _parse_completed(raw: Any) -> bool:
    # strict: a stored "false" string must not read as True
    if isinstance(raw, bool):
        return raw
    raise ValueError(f"bad completed flag {raw!r}")


def task_from_dict(raw: dict[str, Any]) -> Task:
    """Build a Task from one stored record. Raises ValueError on a broken record."""
    try:
        return Task(
            id=_parse_id(raw.get("id")),
            text=normalize_text(raw.get("text")),
            due_date=parse_due_date(raw.get("dueDate")),
            priority=parse_priority(raw.get("priority", Priority.MEDIUM.value)),
            completed=_parse_completed(raw.get("completed", False)),
        )
    except ValidationError as e:
        raise ValueError(e.message) from None


def dumps_tasks(tasks: Iterable[Task], *, last_id: int = 0) -> str:
    """Encode the collection plus the highest id ever issued."""
    records = [task_to_dict(t) for t in tasks]
    high = max([last_id, *(r["id"] for r in records)])
    return json.dumps({"lastId": high, "tasks": records}, ensure_ascii=False)


def _decode_records(data: list[Any]) -> list[Task]:
    out: list[Task] = []
    seen: set[int] = set()
    for idx, raw in enumerate(data):
        if not isinstance(raw, dict):
            logger.warning("Skipping stored task #%d: not an object.", idx)
            continue
        try:
            task = task_from_dict(raw)
        except ValueError as e:
            logger.warning("Skipping stored task #%d: %s", idx, e)
            continue
        if task.id in seen:
            logger.warning("Skipping stored task #%d: duplicate id %s.", idx, task.id)
            continue
        seen.add(task.id)
        out.append(task)
    return out


def loads_collection(payload: str) -> tuple[list[Task], int]:
    """
    Decode a stored payload into (tasks, last issued id).

    Accepts {"lastId": N, "tasks": [...]} and the older bare array.
    Raises PersistenceError if the payload has neither shape.
    Broken records and duplicate ids are skipped (first occurrence wins).
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Stored tasks are not valid JSON: {e}") from e

    last_id = 0
    if isinstance(data, dict) and isinstance(data.get("tasks"), list):
        raw_last = data.get("lastId", 0)
        try:
            last_id = _parse_id(raw_last)
        except ValueError:
            logger.warning("Ignoring stored lastId %r.", raw_last)
        records = data["tasks"]
    elif isinstance(data, list):
        records = data
    else:
        raise PersistenceError("Stored tasks payload has an unknown shape.")

    tasks = _decode_records(records)
    if tasks:
        last_id = max(last_id, max(t.id for t in tasks))
    return tasks, last_id


def loads_tasks(payload: str) -> list[Task]:
    return loads_collection(payload)[0]
