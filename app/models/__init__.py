"""Models package - DDL and entities for the cache and revenue domains."""

from app.models.common import (
    KV_CACHE_DDL,
    BaseEntity,
    CacheEntry,
    CacheMetadata,
    is_empty_payload,
)
from app.models.revenue import (
    MONTH_LABELS,
    VALID_STATUSES,
    WEEKDAY_LABELS,
    Bucket,
    HorizonSeries,
    MonthlyEntry,
    RevenueRecord,
    ViewSeries,
)

ALL_DDL = [
    KV_CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "KV_CACHE_DDL",
    "CacheEntry",
    "CacheMetadata",
    "is_empty_payload",
    # Revenue
    "MONTH_LABELS",
    "WEEKDAY_LABELS",
    "VALID_STATUSES",
    "RevenueRecord",
    "Bucket",
    "HorizonSeries",
    "MonthlyEntry",
    "ViewSeries",
    # All DDL
    "ALL_DDL",
]
