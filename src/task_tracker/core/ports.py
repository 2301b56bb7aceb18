# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete storage backends.
This keeps storage swappable and makes testing easier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import TaskChange


class PersistenceAdapter(Protocol):
    """
    Durable key/value text storage for the serialized task collection.

    - load() returns None when nothing was stored yet.
    - Both methods raise PersistenceError when the backend cannot be used.
    """

    def load(self) -> str | None: ...

    def save(self, payload: str) -> None: ...


ChangeListener = Callable[["TaskChange"], None]
# Subscribed by the render side; invoked by TaskStore after every successful mutation.
