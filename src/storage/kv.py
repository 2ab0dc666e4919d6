"""Key-value persistence port: JSON blobs keyed by fixed names."""

import json
import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger().bind(source="kv_store")


class StorageKeys:
    """Fixed key names for every persisted slice of state."""

    USER_PROGRESS = "user_progress"
    FAVORITES = "favorites"
    JOURNEY_STATE = "journey_state"
    ACHIEVEMENTS = "achievements"
    WEEK_START = "week_start"
    TRACKED_BELIEFS = "tracked_beliefs"
    BELIEF_CHANGES = "belief_changes"
    SETTINGS = "settings"
    DAILY_FACT = "daily_fact"
    LAST_FACT_ID = "last_fact_id"


def wal_connect(db_path: str | Path) -> sqlite3.Connection:
    """Open SQLite connection with WAL journal mode."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


class KeyValueStore(ABC):
    """Read/write JSON-serialisable values by key.

    Writes are best-effort: implementations log and swallow failures so that
    callers never see a persistence error.
    """

    @abstractmethod
    def _read(self, key: str) -> str | None:
        pass

    @abstractmethod
    def _write(self, key: str, raw: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        pass

    def get_json(self, key: str, default: Any = None) -> Any:
        """Return the decoded value for *key*, or *default* if missing or corrupt."""
        raw = self._read(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("kv_decode_failed", key=key, error=str(e))
            return default

    def set_json(self, key: str, value: Any) -> None:
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.warning("kv_encode_failed", key=key, error=str(e))
            return
        self._write(key, raw)


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Values are kept as JSON text to match on-disk behaviour."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self._data.get(key)

    def _write(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """Single-table SQLite store in WAL mode."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with wal_connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP
                )
            """)

    def _read(self, key: str) -> str | None:
        try:
            with wal_connect(self.db_path) as conn:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("kv_read_failed", key=key, error=str(e))
            return None
        return row[0] if row else None

    def _write(self, key: str, raw: str) -> None:
        try:
            with wal_connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value,
                        updated_at = excluded.updated_at
                """,
                    (key, raw, datetime.now().isoformat()),
                )
        except sqlite3.Error as e:
            logger.warning("kv_write_failed", key=key, error=str(e))

    def delete(self, key: str) -> None:
        try:
            with wal_connect(self.db_path) as conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except sqlite3.Error as e:
            logger.warning("kv_delete_failed", key=key, error=str(e))

    def keys(self) -> list[str]:
        try:
            with wal_connect(self.db_path) as conn:
                rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        except sqlite3.Error as e:
            logger.warning("kv_keys_failed", error=str(e))
            return []
        return [r[0] for r in rows]
