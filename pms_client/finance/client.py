"""Finance API client - listing financials and monthly revenue."""

import asyncio
from datetime import date, timedelta

from loguru import logger
from pydantic import ValidationError

from app.models.revenue import MONTH_LABELS
from pms_client.base import BaseClient, safe_request
from pms_client.finance.schemas import ListingFinancialsSchema, MonthlyRevenueSchema


def month_windows(today: date, month_count: int) -> list[tuple[date, date]]:
    """First and last day of the trailing months, newest first."""
    windows = []
    year, month = today.year, today.month
    for _ in range(month_count):
        start = date(year, month, 1)
        next_start = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
        windows.append((start, next_start - timedelta(days=1)))
        year, month = (year - 1, 12) if month == 1 else (year, month - 1)
    return windows


class FinanceClient(BaseClient):
    """Client for finance report endpoints."""

    async def listing_financials(self, params: dict) -> dict:
        """POST /finance/report/listingFinancials - totals for listings in a date range."""
        return await self._post("finance/report/listingFinancials", params)

    async def monthly_revenue(
        self,
        listing_ids: list[int],
        month_count: int = 24,
        today: date | None = None,
    ) -> dict:
        """Owner payout per month for the trailing `month_count` months.

        Months whose report request fails are left out of the series.
        """
        windows = month_windows(today or date.today(), month_count)
        reports = await asyncio.gather(
            *(
                safe_request(
                    self.listing_financials(
                        {
                            "listingMapIds": listing_ids,
                            "fromDate": start.isoformat(),
                            "toDate": end.isoformat(),
                            "dateType": "arrivalDate",
                        }
                    ),
                    None,
                )
                for start, end in windows
            )
        )

        series = MonthlyRevenueSchema()
        for (start, _), report in zip(windows, reports):
            if report is None:
                logger.warning("No financials for {}-{:02d}", start.year, start.month)
                continue
            try:
                parsed = ListingFinancialsSchema.model_validate(report)
            except ValidationError as e:
                logger.warning("Malformed financials for {}-{:02d}: {}", start.year, start.month, e)
                continue
            series.labels.append(MONTH_LABELS[start.month - 1])
            series.data.append(parsed.result.owner_payout)
            series.years.append(start.year)

        logger.info("Monthly revenue: {}/{} months for {} listings", len(series.labels), month_count, len(listing_ids))
        return series.model_dump()
