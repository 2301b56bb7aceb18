# src/task_tracker/storage/sqlite_kv.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from ..core.errors import PersistenceError

logger = logging.getLogger(__name__)


class SqliteStorage:
    """
    SQLite key/value storage (localStorage-style: one text value per key).

    One row per key; the task collection lives under a single key as a JSON text blob.

    The file is not touched until the first load()/save(), so a missing,
    locked or corrupt database surfaces as PersistenceError from those calls.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", key: str = "tasks") -> None:
        self._db_path = Path(db_path)
        self.key = key
        self._schema_ready = False

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        if self._schema_ready:
            return
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at REAL NOT NULL
            )
            """
        )
        conn.commit()
        self._schema_ready = True
        logger.info("SqliteStorage ready db=%s key=%s", self._db_path, self.key)

    def _open(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._get_conn()
        try:
            self._ensure_schema(conn)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    # ---- public API ----

    def load(self) -> str | None:
        try:
            conn = self._open()
            try:
                row = conn.execute(
                    "SELECT value FROM storage WHERE key = ?", (self.key,)
                ).fetchone()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise PersistenceError(f"Failed to read key {self.key!r} from {self._db_path}: {e}") from e
        return None if row is None else str(row[0])

    def save(self, payload: str) -> None:
        try:
            conn = self._open()
            try:
                conn.execute(
                    """
                    INSERT INTO storage(key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (self.key, payload, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise PersistenceError(f"Failed to write key {self.key!r} to {self._db_path}: {e}") from e
        logger.debug("Saved key=%s bytes=%d", self.key, len(payload))
