# src/task_tracker/core/errors.py

"""Structured error types raised by the task core."""

from __future__ import annotations

from typing import Any, Mapping


class TaskTrackerError(RuntimeError):
    """Base error carrying a stable code and serializable details."""

    code = "TASK_TRACKER_ERROR"

    def __init__(self, message: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(TaskTrackerError, ValueError):
    """Input breaks a task invariant (blank text, bad due date, unknown priority)."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class NotFoundError(TaskTrackerError, LookupError):
    """No task with the given id."""

    code = "NOT_FOUND"

    def __init__(self, task_id: Any) -> None:
        super().__init__(f"Task {task_id} not found.", {"task_id": task_id})
        self.task_id = task_id


class PersistenceError(TaskTrackerError):
    """Storage could not be read or written, or held an unreadable payload."""

    code = "PERSISTENCE_ERROR"
