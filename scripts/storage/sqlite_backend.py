"""SQLite database storage backend.

This module provides a storage backend that persists key-value pairs to a SQLite
database. It uses transactions and WAL mode for reliability and concurrent access.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

# SQL schema for the SQLite database
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SQLiteStorageBackend:
    """SQLite database key-value store.

    Stores each key as one row of the kv_store table. Uses transactions for
    atomicity and WAL mode for better concurrent access patterns.

    Attributes:
        db_path: The Path to the SQLite database file.

    Example:
        backend = SQLiteStorageBackend(Path("/home/user/project/.todo/store.db"))
        backend.set("sorting", '"ALPHABET"')
        raw = backend.get("sorting")
    """

    def __init__(self, db_path: Path) -> None:
        """Initialize the SQLite storage backend.

        Nothing is touched on disk until the first operation, which creates the
        database file and schema if they don't exist.

        Args:
            db_path: The path to the SQLite database file.
        """
        self.db_path = db_path
        self._schema_ready = False

    def _connect(self) -> sqlite3.Connection:
        """Create and configure a database connection.

        Enables WAL mode for better concurrent access, sets IMMEDIATE
        isolation level for transaction control, and creates the kv_store
        table on the first connection.

        Returns:
            A configured sqlite3.Connection object.

        Raises:
            OSError: If the parent directory cannot be created.
            sqlite3.Error: If there's an error connecting to the database.
        """
        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(
            str(self.db_path),
            isolation_level="IMMEDIATE",
            check_same_thread=False,  # Safe: each operation uses fresh connection
        )
        try:
            conn.execute("PRAGMA journal_mode=WAL")
            if not self._schema_ready:
                conn.executescript(SCHEMA_SQL)
                self._schema_ready = True
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def _execute_write(self, sql: str, params: tuple = ()) -> None:
        """Run a single write statement inside a transaction.

        Raises:
            sqlite3.Error: If the statement fails. The transaction is rolled back.
        """
        conn = self._connect()
        try:
            conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error:
            try:
                conn.rollback()
            except sqlite3.Error:
                pass  # Connection may be in bad state after commit failure
            raise
        finally:
            conn.close()

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent.

        Raises:
            sqlite3.Error: If there's an error querying the database.
        """
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return None if row is None else row[0]
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        """Insert or replace the row for key.

        Raises:
            sqlite3.Error: If there's an error during the transaction.
        """
        self._execute_write(
            "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
            (key, value),
        )

    def remove(self, key: str) -> None:
        """Delete the row for key, if any."""
        self._execute_write("DELETE FROM kv_store WHERE key = ?", (key,))

    def clear(self) -> None:
        """Delete every row."""
        self._execute_write("DELETE FROM kv_store")

