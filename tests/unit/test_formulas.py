"""Tests for revenue formulas module."""

from datetime import datetime, timedelta, timezone

from app.services.revenue import formulas


class TestMonthDistance:
    def test_same_month(self):
        assert formulas.month_distance(datetime(2024, 6, 30), datetime(2024, 6, 1)) == 0

    def test_across_year(self):
        assert formulas.month_distance(datetime(2024, 2, 1), datetime(2023, 11, 30)) == 3

    def test_future_is_negative(self):
        assert formulas.month_distance(datetime(2024, 6, 1), datetime(2024, 8, 1)) == -2


class TestDayDistance:
    def test_same_instant(self):
        now = datetime(2024, 6, 15, 12)
        assert formulas.day_distance(now, now) == 0

    def test_partial_day_floors(self):
        now = datetime(2024, 6, 15, 12)
        assert formulas.day_distance(now, now - timedelta(hours=30)) == 1

    def test_weeks(self):
        now = datetime(2024, 6, 15)
        assert formulas.day_distance(now, now - timedelta(days=20), 7) == 2

    def test_future_floors_down(self):
        now = datetime(2024, 6, 15)
        assert formulas.day_distance(now, now + timedelta(hours=1)) == -1


class TestShiftMonths:
    def test_back_across_year(self):
        assert formulas.shift_months(datetime(2024, 2, 10), -3) == datetime(2023, 11, 10)

    def test_clamps_day(self):
        assert formulas.shift_months(datetime(2024, 5, 31), -3) == datetime(2024, 2, 29)

    def test_leap_day_back_a_year(self):
        assert formulas.shift_months(datetime(2024, 2, 29), -12) == datetime(2023, 2, 28)

    def test_forward(self):
        assert formulas.shift_months(datetime(2024, 11, 15), 2) == datetime(2025, 1, 15)


class TestRounding:
    def test_half_up(self):
        assert formulas.round_revenue(2.5) == 3
        assert formulas.round_revenue(0.5) == 1

    def test_down(self):
        assert formulas.round_revenue(1.49) == 1

    def test_integer_result(self):
        assert isinstance(formulas.round_revenue(10.0), int)


class TestFormatCurrency:
    def test_thousands(self):
        assert formulas.format_currency(1234.4) == "$1,234"

    def test_negative(self):
        assert formulas.format_currency(-50) == "-$50"

    def test_zero(self):
        assert formulas.format_currency(0) == "$0"


class TestToNaive:
    def test_naive_unchanged(self):
        dt = datetime(2024, 6, 15, 8)
        assert formulas.to_naive(dt) is dt

    def test_aware_loses_tz(self):
        dt = datetime(2024, 6, 15, 8, tzinfo=timezone.utc)
        assert formulas.to_naive(dt).tzinfo is None
