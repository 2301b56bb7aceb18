# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from datetime import date
from typing import Any

from ..core.errors import NotFoundError, PersistenceError
from ..core.ports import ChangeListener, PersistenceAdapter
from .task_codec import dumps_tasks, loads_collection, normalize_text, parse_due_date, parse_priority
from .task_models import ChangeKind, Priority, Task, TaskChange

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection with write-through persistence.

    Ownership:
    - the store is the only place where Task fields change,
    - callers always receive copies (list/get and mutator return values).

    Persistence:
    - every mutation ends with exactly one storage.save(),
    - a failed save keeps the in-memory change; the error is logged,
      kept in `last_save_error` and reported as TaskChange.persisted=False,
    - a failed or corrupt load leaves an empty collection.

    Ids are millisecond timestamps bumped to stay strictly increasing, so
    tasks created within the same millisecond still get distinct ids.
    """

    def __init__(
        self,
        storage: PersistenceAdapter,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._tasks: list[Task] = []
        self._last_id = 0
        self._listeners: list[ChangeListener] = []
        self.last_save_error: PersistenceError | None = None

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def _find(self, task_id: Any) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def _persist(self) -> bool:
        try:
            self._storage.save(dumps_tasks(self._tasks, last_id=self._last_id))
        except PersistenceError as e:
            self.last_save_error = e
            logger.warning("Tasks not saved (kept in memory): %s", e)
            return False
        self.last_save_error = None
        return True

    def _emit(self, change: TaskChange) -> None:
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Task change listener failed (kind=%s).", change.kind)

    def _commit(self, kind: ChangeKind, task_id: int | None = None) -> None:
        persisted = self._persist()
        self._emit(TaskChange(kind=kind, task_id=task_id, persisted=persisted))

    # ---- observers ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            # identity, not equality: listeners may be dataclasses
            self._listeners = [fn for fn in self._listeners if fn is not listener]

        return _unsubscribe

    # ---- queries ----

    def list(self) -> tuple[Task, ...]:
        return tuple(t.copy() for t in self._tasks)

    def get(self, task_id: int) -> Task:
        return self._find(task_id).copy()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list())

    # ---- mutations ----

    def create(
        self,
        text: str,
        due_date: date | str,
        priority: Priority | str = Priority.MEDIUM,
    ) -> Task:
        clean_text = normalize_text(text)
        due = parse_due_date(due_date)
        prio = parse_priority(priority)

        task = Task(id=self._allocate_id(), text=clean_text, due_date=due, priority=prio)
        self._tasks.append(task)
        logger.debug("Task created id=%s due=%s priority=%s", task.id, due, prio.value)
        self._commit(ChangeKind.CREATED, task.id)
        return task.copy()

    def update(
        self,
        task_id: int,
        text: str,
        due_date: date | str,
        priority: Priority | str,
    ) -> Task:
        task = self._find(task_id)
        clean_text = normalize_text(text)
        due = parse_due_date(due_date)
        prio = parse_priority(priority)

        task.text = clean_text
        task.due_date = due
        task.priority = prio
        logger.debug("Task updated id=%s due=%s priority=%s", task.id, due, prio.value)
        self._commit(ChangeKind.UPDATED, task.id)
        return task.copy()

    def toggle_complete(self, task_id: int, completed: bool) -> Task:
        task = self._find(task_id)
        task.completed = bool(completed)
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self._commit(ChangeKind.TOGGLED, task.id)
        return task.copy()

    def delete(self, task_id: int) -> None:
        """Remove a task. Unknown ids raise NotFoundError (no silent no-op)."""
        task = self._find(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        self._commit(ChangeKind.DELETED, task.id)

    def clear_all(self) -> None:
        """Empty the collection and store an empty list (the key is kept)."""
        self._tasks = []
        logger.debug("All tasks cleared.")
        self._commit(ChangeKind.CLEARED)

    # ---- persistence ----

    def load(self) -> None:
        """
        Replace the collection with what storage holds.

        Missing, unreadable or corrupt payloads give an empty collection.
        """
        try:
            payload = self._storage.load()
            tasks, stored_last_id = loads_collection(payload) if payload else ([], 0)
        except PersistenceError as e:
            logger.warning("Could not load tasks, starting empty: %s", e)
            tasks, stored_last_id = [], 0

        self._tasks = tasks
        # ids of deleted tasks stay reserved
        self._last_id = max(self._last_id, stored_last_id)
        logger.info("TaskStore loaded total=%s", len(tasks))
        self._emit(TaskChange(kind=ChangeKind.LOADED))
