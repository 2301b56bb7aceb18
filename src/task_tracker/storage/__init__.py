"""
Persistence adapters for the task collection.

Components:
- memory.py: in-process storage (ephemeral backend, tests)
- json_file.py: one JSON file per key, atomic replace on write
- sqlite_kv.py: SQLite key/value table (default backend)
"""

from __future__ import annotations

import logging

from ..core.ports import PersistenceAdapter
from .json_file import JsonFileStorage
from .memory import MemoryStorage
from .sqlite_kv import SqliteStorage

logger = logging.getLogger(__name__)

BACKENDS = ("sqlite", "json", "memory")


def build_storage(settings) -> PersistenceAdapter:
    """Pick the storage backend named by settings.storage_backend."""
    backend = str(getattr(settings, "storage_backend", "sqlite")).strip().lower()
    key = getattr(settings, "storage_key", "tasks")

    if backend == "memory":
        return MemoryStorage(key=key)
    if backend == "json":
        return JsonFileStorage(settings.tasks_json_dir, key=key)
    if backend != "sqlite":
        logger.warning("Unknown storage backend %r, using sqlite.", backend)
    return SqliteStorage(settings.tasks_db_path, key=key)


__all__ = ["BACKENDS", "JsonFileStorage", "MemoryStorage", "SqliteStorage", "build_storage"]
