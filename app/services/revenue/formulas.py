"""Pure date and money formulas - no dependencies, easily testable."""
import calendar
import math
from datetime import datetime, timedelta


def to_naive(dt: datetime) -> datetime:
    """Aware datetimes become naive local time; naive ones pass through."""
    return dt.astimezone().replace(tzinfo=None) if dt.tzinfo else dt


def month_distance(a: datetime, b: datetime) -> int:
    """Calendar months from b to a, ignoring days."""
    return (a.year - b.year) * 12 + (a.month - b.month)


def day_distance(a: datetime, b: datetime, unit_days: int = 1) -> int:
    """Whole `unit_days` periods elapsed from b to a (floored)."""
    return math.floor((a - b) / timedelta(days=unit_days))


def shift_months(dt: datetime, months: int) -> datetime:
    """Move by whole months, clamping the day to the target month's length."""
    total = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(total, 12)
    day = min(dt.day, calendar.monthrange(year, month + 1)[1])
    return dt.replace(year=year, month=month + 1, day=day)


def round_revenue(amount: float) -> int:
    """Round half up to whole currency units."""
    return math.floor(amount + 0.5)


def format_currency(amount: float) -> str:
    """Whole-dollar display, e.g. $1,234 or -$50."""
    value = round_revenue(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,}"
