"""Repositories package - data access layer for the cache database."""

from app.repositories.base import BaseRepository
from app.repositories.common import (
    CacheKeys,
    CacheStore,
    DuckDBKeyValueStore,
    InMemoryKeyValueStore,
    KeyValueStore,
    encode_params,
    entry_key,
    meta_key,
)
from app.repositories.db import (
    close_db,
    get_db,
    init_tables,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CacheStore",
    "CacheKeys",
    "encode_params",
    "entry_key",
    "meta_key",
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "DuckDBKeyValueStore",
]
