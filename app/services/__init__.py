"""Services package - service class exports."""

from app.services.cached_data import ControllerConfig, StaleWhileRevalidateController, use_cached_data
from app.services.revenue import ChartViewAssembler, RevenueBucketAggregator, RevenueService

__all__ = [
    "ControllerConfig",
    "StaleWhileRevalidateController",
    "use_cached_data",
    "ChartViewAssembler",
    "RevenueBucketAggregator",
    "RevenueService",
]
