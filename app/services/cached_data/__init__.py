"""Cached data - stale-while-revalidate controllers."""

from app.services.cached_data.config import ControllerConfig
from app.services.cached_data.controller import (
    CachedDataState,
    StaleWhileRevalidateController,
    use_cached_data,
)

__all__ = [
    "ControllerConfig",
    "CachedDataState",
    "StaleWhileRevalidateController",
    "use_cached_data",
]
