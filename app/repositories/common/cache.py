"""Cache repository - timestamped entries over a key/value store."""

import json
import time
from collections.abc import Callable
from typing import Any

from loguru import logger

from app.models.common import CacheEntry, CacheMetadata, is_empty_payload
from app.repositories.common.keys import CacheKeys
from app.repositories.common.store import KeyValueStore


def entry_key(key: str, params: str = "") -> str:
    """Storage key of a cache entry."""
    return f"{key}_{params}" if params else key


def meta_key(key: str, params: str = "") -> str:
    """Storage key of the metadata sibling of a cache entry."""
    return f"{key}_meta_{params}" if params else f"{key}_meta"


class CacheStore:
    """The single access point to cached data.

    Every put replaces both the entry and its metadata; nothing is merged.
    Unreadable values are logged and reported as absent so callers fall
    back to fetching.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], float] = time.time):
        self._store = store
        self._clock = clock

    async def put(self, key: str, data: Any, params: str = "") -> bool:
        """Save data under key (+ params) and refresh its metadata."""
        now = self._clock()
        try:
            value = json.dumps({"data": data, "timestamp": now})
            meta = json.dumps({"timestamp": now, "isEmpty": is_empty_payload(data)})
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize cache entry {}: {}", entry_key(key, params), e)
            return False

        await self._store.set(entry_key(key, params), value)
        await self._store.set(meta_key(key, params), meta)
        logger.debug("Cache saved: {}", entry_key(key, params))
        return True

    async def get(self, key: str, params: str = "") -> CacheEntry | None:
        """Load an entry regardless of its age."""
        name = entry_key(key, params)
        raw = await self._store.get(name)
        if raw is None:
            logger.debug("Cache miss: {}", name)
            return None

        try:
            payload = json.loads(raw)
            entry = CacheEntry(data=payload["data"], timestamp=float(payload["timestamp"]))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Corrupted cache entry {}: {}", name, e)
            return None

        logger.debug("Cache hit: {}, age {:.0f}s", name, self._clock() - entry.timestamp)
        return entry

    async def get_meta(self, key: str, params: str = "") -> CacheMetadata | None:
        """Load the metadata of an entry."""
        name = meta_key(key, params)
        raw = await self._store.get(name)
        if raw is None:
            return None

        try:
            payload = json.loads(raw)
            return CacheMetadata(timestamp=float(payload["timestamp"]), is_empty=bool(payload.get("isEmpty", False)))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Corrupted cache metadata {}: {}", name, e)
            return None

    async def get_fresh(self, key: str, max_age: float, params: str = "") -> CacheEntry | None:
        """Load an entry only if it is at most max_age seconds old."""
        entry = await self.get(key, params)
        if entry is None:
            return None
        if self._clock() - entry.timestamp > max_age:
            logger.debug("Cache expired: {}", entry_key(key, params))
            return None
        return entry

    async def remove(self, key: str, params: str = "") -> None:
        """Evict one entry and its metadata."""
        await self._store.remove(entry_key(key, params))
        await self._store.remove(meta_key(key, params))

    async def remove_by_prefix(self, prefix: str) -> int:
        """Evict every stored key starting with prefix."""
        keys = [k for k in await self._store.list_keys() if k.startswith(prefix)]
        for k in keys:
            await self._store.remove(k)
        if keys:
            logger.info("Cleared {} cache entries for {}", len(keys), prefix)
        return len(keys)

    async def clear_all(self) -> int:
        """Evict every entry of every known data source."""
        prefixes = tuple(CacheKeys)
        keys = [k for k in await self._store.list_keys() if k.startswith(prefixes)]
        for k in keys:
            await self._store.remove(k)
        logger.info("Cleared all {} cache entries", len(keys))
        return len(keys)

    async def keys(self, prefix: str = "") -> list[str]:
        """Stored keys, optionally filtered by prefix."""
        return [k for k in await self._store.list_keys() if k.startswith(prefix)]
