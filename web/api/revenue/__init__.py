"""Revenue API views."""

from .views import get_chart_view, get_period, get_revenue_summary

__all__ = [
    "get_chart_view",
    "get_period",
    "get_revenue_summary",
]
