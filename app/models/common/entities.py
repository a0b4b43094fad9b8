"""Cache entities - what the cache store writes and reads back."""

from dataclasses import dataclass
from typing import Any

from app.models.common.base import BaseEntity


@dataclass(frozen=True)
class CacheEntry(BaseEntity):
    """Cached payload with its write time (epoch seconds)."""

    data: Any
    timestamp: float


@dataclass(frozen=True)
class CacheMetadata(BaseEntity):
    """Sibling record of a CacheEntry, rewritten on every put."""

    timestamp: float
    is_empty: bool


def is_empty_payload(data: Any) -> bool:
    """None, empty list/tuple and empty dict count as empty."""
    if data is None:
        return True
    if isinstance(data, (list, tuple, dict)):
        return len(data) == 0
    return False
