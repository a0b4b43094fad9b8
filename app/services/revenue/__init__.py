"""Revenue services - bucketing, chart views and cached sources."""

from app.services.revenue.aggregator import (
    HORIZONS,
    PERIODS,
    Horizon,
    RevenueBucketAggregator,
    chart_labels,
    parse_records,
    process_revenue_data,
    revenue_in_range,
)
from app.services.revenue.chart_views import VIEW_MODES, ChartViewAssembler, is_fixed_year, parse_monthly_series
from app.services.revenue.errors import UnknownViewModeError
from app.services.revenue.service import RevenueService

__all__ = [
    "HORIZONS",
    "PERIODS",
    "Horizon",
    "RevenueBucketAggregator",
    "chart_labels",
    "parse_records",
    "process_revenue_data",
    "revenue_in_range",
    "VIEW_MODES",
    "ChartViewAssembler",
    "is_fixed_year",
    "parse_monthly_series",
    "UnknownViewModeError",
    "RevenueService",
]
