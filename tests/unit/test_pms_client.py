"""Tests for the property-management API clients."""

import asyncio
import json
from datetime import date

import httpx
import pytest

from pms_client import FinanceClient, ReservationsClient, safe_request
from pms_client.finance import month_windows

BASE_URL = "https://api.test/v1"


def make_client(cls, handler, **kwargs):
    return cls(base_url=BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


class TestReservationsClient:
    def test_query_and_result(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "result": [{"id": 1}, {"id": 2}]})

        async def run():
            async with make_client(ReservationsClient, handler, access_token="tok") as client:
                return await client.reservations({"listingId": 42, "channelId": None})

        result = asyncio.run(run())

        assert result == [{"id": 1}, {"id": 2}]
        request = seen[0]
        assert request.url.path == "/v1/reservations"
        assert request.url.params["listingId"] == "42"
        assert request.url.params["limit"] == "1000000"
        assert "channelId" not in request.url.params
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.headers["Cache-control"] == "no-cache"

    def test_listing_required(self):
        def handler(request):
            raise AssertionError("no request expected")

        async def run():
            async with make_client(ReservationsClient, handler) as client:
                await client.reservations({"listingId": None})

        with pytest.raises(ValueError):
            asyncio.run(run())

    def test_client_errors_propagate(self):
        async def run():
            async with make_client(ReservationsClient, lambda r: httpx.Response(403)) as client:
                await client.reservations({"listingId": 1})

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())

    def test_requires_context(self):
        client = ReservationsClient(base_url=BASE_URL)
        with pytest.raises(RuntimeError):
            asyncio.run(client.reservations({"listingId": 1}))


class TestMonthWindows:
    def test_newest_first(self):
        windows = month_windows(date(2024, 3, 10), 3)
        assert windows == [
            (date(2024, 3, 1), date(2024, 3, 31)),
            (date(2024, 2, 1), date(2024, 2, 29)),
            (date(2024, 1, 1), date(2024, 1, 31)),
        ]

    def test_crosses_year(self):
        windows = month_windows(date(2024, 1, 5), 2)
        assert windows[1] == (date(2023, 12, 1), date(2023, 12, 31))


class TestFinanceClient:
    def test_monthly_revenue_skips_failed_months(self):
        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            assert body["listingMapIds"] == [7]
            assert body["dateType"] == "arrivalDate"
            if body["fromDate"] == "2024-02-01":
                return httpx.Response(404)
            if body["fromDate"] == "2024-01-01":
                return httpx.Response(200, json={"status": "success"})
            return httpx.Response(200, json={"result": {"ownerPayout": 1250.5}})

        async def run():
            async with make_client(FinanceClient, handler) as client:
                series = await client.monthly_revenue([7], 4, today=date(2024, 3, 20))
                return series, client.request_count

        series, count = asyncio.run(run())

        assert series == {"labels": ["Mar", "Dec"], "data": [1250.5, 1250.5], "years": [2024, 2023]}
        assert count == 4

    def test_listing_financials_posts(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"result": {"ownerPayout": 10}})

        async def run():
            async with make_client(FinanceClient, handler) as client:
                return await client.listing_financials({"listingMapIds": [1]})

        assert asyncio.run(run()) == {"result": {"ownerPayout": 10}}
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/v1/finance/report/listingFinancials"


class TestSafeRequest:
    def test_default_on_failure(self):
        async def boom():
            raise httpx.ConnectError("refused")

        assert asyncio.run(safe_request(boom(), default=[])) == []

    def test_passes_result(self):
        async def ok():
            return 5

        assert asyncio.run(safe_request(ok())) == 5
