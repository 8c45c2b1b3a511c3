"""
Device-local key-value persistence backing the session store.

Values are plain strings; callers decide how to encode them. Multi-key reads
and writes are each applied as one unit.
"""

import sqlite3
import threading
from pathlib import Path
from typing import Iterable, Mapping, Optional, Protocol


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def get_items(self, keys: Iterable[str]) -> dict[str, str]: ...

    def set_items(self, items: Mapping[str, str]) -> None: ...

    def remove_items(self, keys: Iterable[str]) -> None: ...


class SqliteStorage:
    """Single-table SQLite store. Each call uses its own connection."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self._initialized = False

    def _get_conn(self) -> sqlite3.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.path), timeout=10.0)
        if not self._initialized:
            conn.execute("CREATE TABLE IF NOT EXISTS kv (key TEXT PRIMARY KEY, value TEXT NOT NULL)")
            conn.commit()
            self._initialized = True
        return conn

    def get_item(self, key: str) -> Optional[str]:
        return self.get_items([key]).get(key)

    def get_items(self, keys: Iterable[str]) -> dict[str, str]:
        keys = list(keys)
        placeholders = ", ".join("?" for _ in keys)
        conn = self._get_conn()
        try:
            rows = conn.execute(f"SELECT key, value FROM kv WHERE key IN ({placeholders})", keys).fetchall()
            return dict(rows)
        finally:
            conn.close()

    def set_items(self, items: Mapping[str, str]) -> None:
        conn = self._get_conn()
        try:
            with conn:
                conn.executemany(
                    "INSERT INTO kv (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    list(items.items()),
                )
        finally:
            conn.close()

    def remove_items(self, keys: Iterable[str]) -> None:
        conn = self._get_conn()
        try:
            with conn:
                conn.executemany("DELETE FROM kv WHERE key = ?", [(k,) for k in keys])
        finally:
            conn.close()


class MemoryStorage:
    """In-process storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def get_items(self, keys: Iterable[str]) -> dict[str, str]:
        with self._lock:
            return {k: self._data[k] for k in keys if k in self._data}

    def set_items(self, items: Mapping[str, str]) -> None:
        with self._lock:
            self._data.update(items)

    def remove_items(self, keys: Iterable[str]) -> None:
        with self._lock:
            for key in keys:
                self._data.pop(key, None)
