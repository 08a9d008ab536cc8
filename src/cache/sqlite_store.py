# src/cache/sqlite_store.py — v1
"""SQLite-based store (CACHE_BACKEND=sqlite).

Uses stdlib sqlite3, no external dependency.
Values and set members live in two tables sharing one key space.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from tagcache.cache.base_store import BaseKeyValueStore

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_values (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS kv_set_members (
    key TEXT NOT NULL,
    member TEXT NOT NULL,
    PRIMARY KEY (key, member)
);
"""


class SqliteKeyValueStore(BaseKeyValueStore):
    """SQLite-backed store for single-host persistence."""

    def __init__(self, db_path: Path | str) -> None:
        self._db_path = Path(db_path).expanduser()
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(str(self._db_path))
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.executescript(_SCHEMA)
        logger.debug("SQLite store opened at %s", self._db_path)

    async def get(self, key: str) -> str | None:
        cursor = self._conn.execute(
            "SELECT value FROM kv_values WHERE key = ?", (key,)
        )
        row = cursor.fetchone()
        return None if row is None else row[0]

    async def set(self, key: str, value: str) -> None:
        """Store a value (upsert). Replaces a set held at the same key."""
        self._conn.execute("DELETE FROM kv_set_members WHERE key = ?", (key,))
        self._conn.execute(
            """INSERT OR REPLACE INTO kv_values (key, value, updated_at)
               VALUES (?, ?, CURRENT_TIMESTAMP)""",
            (key, value),
        )
        self._conn.commit()

    async def exists(self, key: str) -> bool:
        cursor = self._conn.execute(
            """SELECT 1 FROM kv_values WHERE key = ?
               UNION ALL
               SELECT 1 FROM kv_set_members WHERE key = ?
               LIMIT 1""",
            (key, key),
        )
        return cursor.fetchone() is not None

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            value_rows = self._conn.execute(
                "DELETE FROM kv_values WHERE key = ?", (key,)
            ).rowcount
            set_rows = self._conn.execute(
                "DELETE FROM kv_set_members WHERE key = ?", (key,)
            ).rowcount
            if value_rows or set_rows:
                removed += 1
        self._conn.commit()
        return removed

    async def sadd(self, key: str, *members: str) -> int:
        added = 0
        for member in members:
            added += self._conn.execute(
                "INSERT OR IGNORE INTO kv_set_members (key, member) VALUES (?, ?)",
                (key, member),
            ).rowcount
        self._conn.commit()
        return added

    async def smembers(self, key: str) -> set[str]:
        cursor = self._conn.execute(
            "SELECT member FROM kv_set_members WHERE key = ?", (key,)
        )
        return {row[0] for row in cursor.fetchall()}

    async def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
