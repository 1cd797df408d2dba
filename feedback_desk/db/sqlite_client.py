"""SQLite client utilities.

The feedback desk keeps its data in a single key-value table: each key owns
one slot holding a serialized value.

Updates:
    v0.1.0 - 2026-10-19 - Key-value slot storage for the feedback snapshot.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

STORAGE_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class SQLiteClient:
    """Lightweight wrapper around sqlite3 for key-value slots."""

    def __init__(self, db_path: str | Path) -> None:
        """Initialize the SQLite client.

        Args:
            db_path (str | Path): Path to the SQLite database file.
        """

        self._db_path = Path(db_path)
        if str(db_path) != ":memory:":
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Return or lazily initialize the SQLite connection."""
        if self._connection is None:
            self._connection = sqlite3.connect(self._db_path)
            self._connection.row_factory = sqlite3.Row
        return self._connection

    def initialize_schema(self) -> None:
        """Ensure the storage table exists."""
        with self.connection as conn:
            conn.execute(STORAGE_TABLE_SCHEMA)

    def get_item(self, key: str) -> str | None:
        """Return the value stored under ``key``.

        Args:
            key (str): Slot name.

        Returns:
            str | None: Stored value or ``None`` when the slot is absent.
        """

        with self.connection as conn:
            cursor = conn.execute("SELECT value FROM storage WHERE key = ?", (key,))
            row = cursor.fetchone()
        return None if row is None else row["value"]

    def set_item(self, key: str, value: str) -> None:
        """Create or overwrite the slot ``key`` in a single transaction.

        Args:
            key (str): Slot name.
            value (str): Serialized payload.
        """

        with self.connection as conn:
            conn.execute(
                """
                INSERT INTO storage (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> int:
        """Delete the slot ``key``.

        Args:
            key (str): Slot name.

        Returns:
            int: Number of deleted rows (0 when the slot was already absent).
        """

        with self.connection as conn:
            cursor = conn.execute("DELETE FROM storage WHERE key = ?", (key,))
            return cursor.rowcount

    def has_item(self, key: str) -> bool:
        """Return whether a slot named ``key`` exists."""

        with self.connection as conn:
            cursor = conn.execute(
                "SELECT 1 FROM storage WHERE key = ? LIMIT 1", (key,)
            )
            return cursor.fetchone() is not None

    def close(self) -> None:
        """Close and discard the active SQLite connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
