"""Common models - base classes, cache entities and the cache table."""

from app.models.common.base import BaseEntity
from app.models.common.cache import KV_CACHE_DDL
from app.models.common.entities import CacheEntry, CacheMetadata, is_empty_payload

__all__ = [
    "BaseEntity",
    "KV_CACHE_DDL",
    "CacheEntry",
    "CacheMetadata",
    "is_empty_payload",
]
