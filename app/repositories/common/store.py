"""Key/value store backends behind the cache store."""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime

from app.repositories.base import BaseRepository
from settings import DB_PATH


class KeyValueStore(ABC):
    """Persistent string key/value store, single-process and eventually durable."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Raw value for a key, or None."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a key if present."""

    @abstractmethod
    async def list_keys(self) -> list[str]:
        """All stored keys."""


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def list_keys(self) -> list[str]:
        return sorted(self._data)


class DuckDBKeyValueStore(BaseRepository, KeyValueStore):
    """Key/value store persisted in the `kv_cache` DuckDB table."""

    def __init__(self, db_path: str = DB_PATH):
        super().__init__(db_path)

    async def get(self, key: str) -> str | None:
        row = await asyncio.to_thread(self.fetchone, "SELECT value FROM kv_cache WHERE key = ?", [key])
        return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(
            self.execute,
            "INSERT OR REPLACE INTO kv_cache (key, value, updated_at) VALUES (?, ?, ?)",
            [key, value, datetime.now()],
        )

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self.execute, "DELETE FROM kv_cache WHERE key = ?", [key])

    async def list_keys(self) -> list[str]:
        rows = await asyncio.to_thread(self.fetchall, "SELECT key FROM kv_cache ORDER BY key")
        return [r[0] for r in rows]
