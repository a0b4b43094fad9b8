"""Tests for the revenue API views and service wiring."""

import asyncio
from datetime import datetime

import pytest

from app.container import container
from app.repositories.common import CacheKeys, CacheStore, InMemoryKeyValueStore, encode_params
from app.services.cached_data import ControllerConfig
from app.services.revenue import RevenueService
from web.api.errors import ValidationError, validate_period, validate_view_mode
from web.api.revenue import get_chart_view, get_period, get_revenue_summary

NOW = datetime(2024, 6, 15)

RESERVATIONS = [
    {"arrivalDate": "2024-06-15", "totalPrice": 100, "status": "new"},
    {"arrivalDate": "2024-06-14", "airbnbExpectedPayoutAmount": 80, "totalPrice": 99, "status": "modified"},
    {"arrivalDate": "2024-06-13", "totalPrice": 500, "status": "cancelled"},
    {"arrivalDate": "2024-06-12", "status": "new"},
]


@pytest.fixture
def app_container():
    container.reset()
    container.init(store=InMemoryKeyValueStore())
    yield container
    container.reset()


class TestValidation:
    @pytest.mark.parametrize("mode", ["6M", "YTD", "MTD", "ALL", "2024", 2023])
    def test_valid_modes(self, mode):
        validate_view_mode(mode)

    @pytest.mark.parametrize("mode", ["1W", "QTD", "", "1999"])
    def test_invalid_modes(self, mode):
        with pytest.raises(ValidationError):
            validate_view_mode(mode)

    def test_invalid_period(self):
        with pytest.raises(ValidationError) as exc:
            validate_period("2Y")
        assert "2Y" in exc.value.message


class TestRevenueViews:
    def test_summary(self, app_container):
        summary = get_revenue_summary(RESERVATIONS, NOW)

        assert summary.total_records == 4
        week = summary.items[0]
        assert week.period == "1W"
        assert week.data == [0, 0, 0, 0, 0, 80, 100]
        assert week.total == 180
        assert len(week.labels) == 7
        assert [item.period for item in summary.items] == ["1W", "1M", "3M", "6M", "1Y", "ALL"]

    def test_period(self, app_container):
        item = get_period(RESERVATIONS, "ALL", NOW)
        assert item.labels == ["2021", "2022", "2023", "2024"]
        assert item.data == [0, 0, 0, 180]

    def test_period_validated(self, app_container):
        with pytest.raises(ValidationError):
            get_period(RESERVATIONS, "5Y", NOW)

    def test_chart_view(self, app_container):
        monthly = {"labels": ["Jun", "May"], "data": [300, 200], "years": [2024, 2024]}
        view = get_chart_view(monthly, "YTD", NOW)
        assert view.mode == "YTD"
        assert view.values == [0, 0, 0, 0, 200, 300]
        assert view.total == 500

    def test_chart_view_validated(self, app_container):
        with pytest.raises(ValidationError):
            get_chart_view({}, "1W", NOW)


class FakeFinanceClient:
    """Stands in for FinanceClient inside `async with`."""

    calls: list = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        return None

    async def monthly_revenue(self, listing_ids, month_count):
        self.calls.append((listing_ids, month_count))
        return {"labels": ["Jun"], "data": [1000.0], "years": [2024]}

    async def listing_financials(self, params):
        return {"result": {"ownerPayout": 321.5}}


class TestRevenueService:
    @pytest.fixture
    def service(self, cache, clock):
        FakeFinanceClient.calls = []
        return RevenueService(cache, ControllerConfig(clock=clock), finance_client=FakeFinanceClient)

    def test_monthly_revenue_cached_per_listing_set(self, service, cache):
        async def run():
            ctrl = service.monthly_revenue([3, 1], month_count=12)
            await ctrl.start()
            return ctrl

        ctrl = asyncio.run(run())

        assert ctrl.data == {"labels": ["Jun"], "data": [1000.0], "years": [2024]}
        assert FakeFinanceClient.calls == [([1, 3], 12)]
        params = encode_params({"listingIds": [1, 3], "monthCount": 12})
        assert asyncio.run(cache.get(CacheKeys.MONTHLY_REVENUE, params)).data == ctrl.data

    def test_monthly_revenue_served_from_cache(self, service, store, clock):
        seeded = CacheStore(store, clock=clock)
        params = encode_params({"listingIds": [1], "monthCount": 24})
        asyncio.run(seeded.put(CacheKeys.MONTHLY_REVENUE, {"labels": [], "data": [], "years": []}, params))

        ctrl = service.monthly_revenue([1], auto_fetch=False)
        asyncio.run(ctrl.load_cached_and_fetch())

        assert ctrl.data == {"labels": [], "data": [], "years": []}
        assert FakeFinanceClient.calls == []

    def test_owner_payout(self, service):
        assert asyncio.run(service.owner_payout({"listingMapIds": [1]})) == 321.5

    def test_monthly_from_reservations(self, service):
        series = service.monthly_from_reservations(RESERVATIONS, NOW)
        assert series["labels"][0] == "Jun"
        assert series["data"][0] == 180
        assert len(series["data"]) == 24

    def test_revenue_in_range(self, service):
        total = service.revenue_in_range(RESERVATIONS, datetime(2024, 6, 14), datetime(2024, 6, 15))
        assert total == 180
