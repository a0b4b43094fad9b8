"""Revenue models."""

from app.models.revenue.entities import (
    MONTH_LABELS,
    VALID_STATUSES,
    WEEKDAY_LABELS,
    Bucket,
    HorizonSeries,
    MonthlyEntry,
    RevenueRecord,
    ViewSeries,
)

__all__ = [
    "MONTH_LABELS",
    "WEEKDAY_LABELS",
    "VALID_STATUSES",
    "RevenueRecord",
    "Bucket",
    "HorizonSeries",
    "MonthlyEntry",
    "ViewSeries",
]
