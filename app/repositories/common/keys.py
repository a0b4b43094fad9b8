"""Cache key names and canonical parameter encoding."""

import json
from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class CacheKeys(StrEnum):
    """Base keys of the cached data sources."""

    UPCOMING_RESERVATIONS = "cache_upcoming_reservations"
    RESERVATIONS = "cache_reservations"
    CALENDAR = "cache_calendar"
    MONTHLY_REVENUE = "cache_monthly_revenue"
    LISTINGS = "cache_listings"


def encode_params(params: Mapping[str, Any] | None) -> str:
    """Canonical cache-key suffix for request parameters.

    None values are dropped and keys sorted, so two mappings holding the same
    pairs encode identically whatever their insertion order. No parameters
    (or only None values) encode to "".
    """
    if not params:
        return ""

    cleaned = {str(k): v for k, v in params.items() if v is not None}
    if not cleaned:
        return ""

    return json.dumps(cleaned, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
