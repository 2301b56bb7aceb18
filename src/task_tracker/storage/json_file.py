# src/task_tracker/storage/json_file.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    One JSON file per storage key: <directory>/<key>.json.

    Writes go to a temp file first and are moved into place with os.replace,
    so a crash mid-write never leaves a half-written payload behind.
    """

    def __init__(self, directory: str | Path, key: str = "tasks") -> None:
        self._dir = Path(directory)
        self.key = key
        self.path = self._dir / f"{key}.json"

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Failed to read {self.path}: {e}") from e

    def save(self, payload: str) -> None:
        tmp = self.path.with_suffix(".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise PersistenceError(f"Failed to write {self.path}: {e}") from e

        with contextlib.suppress(OSError):
            os.chmod(self.path, 0o600)
        logger.debug("Saved %d bytes to %s", len(payload), self.path)
