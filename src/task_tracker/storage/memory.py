# src/task_tracker/storage/memory.py

from __future__ import annotations

from ..core.errors import PersistenceError


class MemoryStorage:
    """
    Process-local key/value storage.

    Used by the "memory" backend (nothing survives a restart) and by tests.
    `fail_reads` / `fail_writes` simulate a broken backend.
    """

    def __init__(self, key: str = "tasks", initial: dict[str, str] | None = None) -> None:
        self.key = key
        self.values: dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def load(self) -> str | None:
        if self.fail_reads:
            raise PersistenceError(f"Read failed for key {self.key!r}.")
        return self.values.get(self.key)

    def save(self, payload: str) -> None:
        if self.fail_writes:
            raise PersistenceError(f"Write failed for key {self.key!r}.")
        self.values[self.key] = payload
        self.writes += 1
