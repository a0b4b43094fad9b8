"""Revenue service - cached remote sources plus local aggregation."""

from collections.abc import Callable, Iterable
from datetime import datetime

from loguru import logger

from app.models.revenue import HorizonSeries, ViewSeries
from app.repositories.common import CacheKeys, CacheStore
from app.services.cached_data import ControllerConfig, StaleWhileRevalidateController
from app.services.revenue.aggregator import (
    RevenueBucketAggregator,
    parse_records,
    revenue_in_range,
)
from app.services.revenue.chart_views import ChartViewAssembler
from pms_client.finance import FinanceClient, ListingFinancialsSchema
from pms_client.reservations import ReservationsClient
from settings import MONTHLY_REVENUE_MONTHS


class RevenueService:
    """Revenue business logic."""

    def __init__(
        self,
        cache: CacheStore,
        config: ControllerConfig,
        finance_client: Callable[[], FinanceClient] = FinanceClient,
        reservations_client: Callable[[], ReservationsClient] = ReservationsClient,
    ):
        self._cache = cache
        self._config = config
        self._finance_client = finance_client
        self._reservations_client = reservations_client
        self._aggregator = RevenueBucketAggregator()
        self._assembler = ChartViewAssembler()

    # Cached remote sources

    def monthly_revenue(
        self,
        listing_ids: list[int],
        month_count: int = MONTHLY_REVENUE_MONTHS,
        auto_fetch: bool = True,
    ) -> StaleWhileRevalidateController:
        """Controller over the monthly owner-payout report of a set of listings."""

        async def fetch(params: dict) -> dict:
            async with self._finance_client() as client:
                return await client.monthly_revenue(params["listingIds"], params["monthCount"])

        return StaleWhileRevalidateController(
            CacheKeys.MONTHLY_REVENUE,
            fetch,
            self._cache,
            params={"listingIds": sorted(listing_ids), "monthCount": month_count},
            auto_fetch=auto_fetch,
            config=self._config,
        )

    def reservations(self, listing_id: int, auto_fetch: bool = True, **filters) -> StaleWhileRevalidateController:
        """Controller over the reservations of one listing."""

        async def fetch(params: dict) -> list[dict]:
            async with self._reservations_client() as client:
                return await client.reservations(params)

        return StaleWhileRevalidateController(
            CacheKeys.RESERVATIONS,
            fetch,
            self._cache,
            params={"listingId": listing_id, **filters},
            auto_fetch=auto_fetch,
            config=self._config,
        )

    async def owner_payout(self, params: dict) -> float:
        """Owner payout of the listing financials report."""
        async with self._finance_client() as client:
            report = await client.listing_financials(params)
        return ListingFinancialsSchema.model_validate(report).result.owner_payout

    # Local computations

    def summary(self, reservations: Iterable, now: datetime | None = None) -> dict[str, HorizonSeries]:
        """Horizon series for a reservation feed."""
        records = parse_records(reservations)
        result = self._aggregator.aggregate(records, now)
        logger.info("Revenue summary from {} records, 6M total {}", len(records), result["6M"].total)
        return result

    def monthly_from_reservations(self, reservations: Iterable, now: datetime | None = None) -> dict:
        """Monthly series computed locally from a reservation feed."""
        return self._aggregator.monthly_series(parse_records(reservations), now, MONTHLY_REVENUE_MONTHS)

    def chart_view(self, monthly, mode: str | int, now: datetime | None = None) -> ViewSeries:
        """One chart view over a monthly series."""
        return self._assembler.assemble(monthly, mode, now)

    def revenue_in_range(
        self,
        reservations: Iterable,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> float:
        """Accepted revenue with arrival in [start, end]."""
        return revenue_in_range(parse_records(reservations), start, end)
