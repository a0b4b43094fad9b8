"""Revenue API views - thin layer over services."""

from collections.abc import Iterable
from datetime import datetime

from app.container import container
from app.services.revenue import chart_labels
from web.api.errors import validate_period, validate_view_mode

from .schemas import ChartViewResponse, PeriodItem, RevenueSummaryResponse


def get_revenue_summary(reservations: Iterable, now: datetime | None = None) -> RevenueSummaryResponse:
    """Get bucketed revenue for every horizon."""
    reservations = list(reservations)
    now = now or datetime.now()
    data = container.revenue.summary(reservations, now)

    items = [
        PeriodItem(
            period=period,
            labels=chart_labels(period, now),
            data=s.data,
            total=s.total,
        )
        for period, s in data.items()
    ]

    return RevenueSummaryResponse(items=items, total_records=len(reservations))


def get_period(reservations: Iterable, period: str, now: datetime | None = None) -> PeriodItem:
    """Get bucketed revenue for one horizon."""
    validate_period(period)
    summary = get_revenue_summary(reservations, now)
    return next(item for item in summary.items if item.period == period)


def get_chart_view(monthly, mode: str | int, now: datetime | None = None) -> ChartViewResponse:
    """Get one chart view over a monthly revenue series."""
    validate_view_mode(mode)
    view = container.revenue.chart_view(monthly, mode, now)

    return ChartViewResponse(
        mode=view.mode,
        labels=view.labels,
        values=view.values,
        years=view.years,
        total=view.total,
    )
