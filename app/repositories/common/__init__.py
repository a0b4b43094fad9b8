"""Common repositories - cache store, key/value backends and key encoding."""

from app.repositories.common.cache import CacheStore, entry_key, meta_key
from app.repositories.common.keys import CacheKeys, encode_params
from app.repositories.common.store import DuckDBKeyValueStore, InMemoryKeyValueStore, KeyValueStore

__all__ = [
    "CacheStore",
    "entry_key",
    "meta_key",
    "CacheKeys",
    "encode_params",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "DuckDBKeyValueStore",
]
