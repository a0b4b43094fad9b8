"""Finance API - client and schemas."""

from pms_client.finance.client import FinanceClient, month_windows
from pms_client.finance.schemas import (
    FinancialsResultSchema,
    ListingFinancialsSchema,
    MonthlyRevenueSchema,
)

__all__ = [
    "FinanceClient",
    "month_windows",
    "FinancialsResultSchema",
    "ListingFinancialsSchema",
    "MonthlyRevenueSchema",
]
