"""
SQLite database access (raw SQL) using the standard `sqlite3` driver.

One connection is opened per process by the entrypoint (see `api/main.py`)
and shared by every request. All statements run while holding a single
lock, so at most one database operation is in flight at any time.

SQL parameter style:
- sqlite3 named placeholders: :name
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
import threading
from typing import Any

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


# Storage failures are explicit and separable from other runtime errors.
class StorageError(RuntimeError):
    pass


class Database:
    def __init__(self, connection: sqlite3.Connection, *, path: str) -> None:
        self.path = path
        self._connection = connection
        self._lock = threading.Lock()

    def run(self, sql: str, params: dict[str, Any] | None = None) -> None:
        """
        Run a statement on the calling thread. No result returned.
        """
        with self._lock:
            try:
                self._connection.execute(sql, params or {})
            except sqlite3.Error as exc:
                raise StorageError(str(exc)) from exc

    async def execute(self, sql: str, params: dict[str, Any] | None = None) -> None:
        """
        Run a statement (INSERT/DDL) in a worker thread. No result returned.
        """
        # Waiting on the lock happens off the event loop.
        await asyncio.to_thread(self.run, sql, params)

    def close(self) -> None:
        with self._lock:
            self._connection.close()


def open_database(path: str | None = None) -> Database:
    """
    Open the database file at `path`, or an in-memory database when omitted.
    """
    target = (path or "").strip() or MEMORY_PATH
    try:
        # Autocommit: each statement is its own transaction.
        connection = sqlite3.connect(target, check_same_thread=False, isolation_level=None)
    except sqlite3.Error as exc:
        raise StorageError(f"Failed to open database {target}: {exc}") from exc

    logger.info("database_opened path=%s", target)
    return Database(connection, path=target)
