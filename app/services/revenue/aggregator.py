"""Revenue bucketing - six lookback horizons over one reservation feed."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from loguru import logger
from pydantic import ValidationError

from app.models.revenue import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    Bucket,
    HorizonSeries,
    RevenueRecord,
)
from app.services.revenue import formulas
from app.services.revenue.errors import UnknownViewModeError
from pms_client.reservations import ReservationSchema


@dataclass(frozen=True)
class Horizon:
    """A fixed lookback window split into equal buckets (oldest first)."""

    key: str
    buckets: int
    window_start: Callable[[datetime], datetime]
    bucket_index: Callable[[datetime, datetime], int]


HORIZONS = (
    Horizon(
        "1W", 7,
        lambda now: now - timedelta(days=7),
        lambda now, d: 6 - formulas.day_distance(now, d, 1),
    ),
    Horizon(
        "1M", 4,
        lambda now: now - timedelta(days=30),
        lambda now, d: 3 - formulas.day_distance(now, d, 7),
    ),
    Horizon(
        "3M", 3,
        lambda now: formulas.shift_months(now, -3),
        lambda now, d: 2 - formulas.month_distance(now, d),
    ),
    Horizon(
        "6M", 6,
        lambda now: formulas.shift_months(now, -6),
        lambda now, d: 5 - formulas.month_distance(now, d),
    ),
    Horizon(
        "1Y", 4,
        lambda now: formulas.shift_months(now, -12),
        lambda now, d: 3 - formulas.month_distance(now, d) // 3,
    ),
    Horizon(
        "ALL", 4,
        lambda now: formulas.shift_months(now, -36),
        lambda now, d: 3 - (now.year - d.year),
    ),
)

PERIODS = tuple(h.key for h in HORIZONS)


def parse_records(items: Iterable) -> list[RevenueRecord]:
    """Turn raw reservations into records, skipping malformed ones."""
    records = []
    for i, item in enumerate(items):
        if isinstance(item, RevenueRecord):
            records.append(item)
            continue
        try:
            res = item if isinstance(item, ReservationSchema) else ReservationSchema.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping malformed reservation #{}: {} error(s)", i, e.error_count())
            continue
        records.append(
            RevenueRecord(
                arrival_date=formulas.to_naive(res.arrival_date),
                amount=res.amount,
                status=res.status,
            )
        )
    return records


class RevenueBucketAggregator:
    """Buckets accepted revenue records into independent horizons.

    Horizons overlap: one record may count in several of them. Sums are kept
    unrounded and rounded once on output.
    """

    def __init__(self, horizons: tuple[Horizon, ...] = HORIZONS):
        self._horizons = horizons

    def aggregate(self, records: Iterable[RevenueRecord], now: datetime | None = None) -> dict[str, HorizonSeries]:
        """Bucket values and totals per horizon key."""
        now = formulas.to_naive(now) if now else datetime.now()
        accepted = [r for r in records if r.accepted]

        result = {}
        for horizon in self._horizons:
            result[horizon.key] = self._bucket(horizon, accepted, now)

        logger.debug("Aggregated {} accepted records into {} horizons", len(accepted), len(result))
        return result

    @staticmethod
    def _bucket(horizon: Horizon, records: list[RevenueRecord], now: datetime) -> HorizonSeries:
        buckets = [Bucket(index=i) for i in range(horizon.buckets)]
        total = 0.0
        start = horizon.window_start(now)

        for r in records:
            if r.arrival_date < start:
                continue
            idx = horizon.bucket_index(now, r.arrival_date)
            if not 0 <= idx < horizon.buckets:
                continue
            buckets[idx].total += r.amount
            total += r.amount

        return HorizonSeries(
            data=[formulas.round_revenue(b.total) for b in buckets],
            total=formulas.round_revenue(total),
        )

    def monthly_series(
        self,
        records: Iterable[RevenueRecord],
        now: datetime | None = None,
        months: int = 24,
    ) -> dict:
        """Per-month totals for the trailing months, newest first.

        Same shape as the remote monthly revenue report: labels, data, years.
        """
        now = formulas.to_naive(now) if now else datetime.now()
        totals = [0.0] * months
        for r in records:
            if not r.accepted:
                continue
            distance = formulas.month_distance(now, r.arrival_date)
            if 0 <= distance < months:
                totals[distance] += r.amount

        labels, years = [], []
        for distance in range(months):
            month_start = formulas.shift_months(now.replace(day=1), -distance)
            labels.append(MONTH_LABELS[month_start.month - 1])
            years.append(month_start.year)

        return {
            "labels": labels,
            "data": [formulas.round_revenue(t) for t in totals],
            "years": years,
        }


def chart_labels(period: str, now: datetime | None = None) -> list[str]:
    """Display labels for a horizon, oldest bucket first."""
    now = formulas.to_naive(now) if now else datetime.now()

    match period:
        case "1W":
            return [WEEKDAY_LABELS[(now - timedelta(days=6 - i)).weekday()] for i in range(7)]
        case "1M":
            return ["Week 4", "Week 3", "Week 2", "Week 1"]
        case "3M" | "6M":
            count = 3 if period == "3M" else 6
            first = now.replace(day=1)
            return [MONTH_LABELS[formulas.shift_months(first, -(count - 1 - i)).month - 1] for i in range(count)]
        case "1Y":
            current_quarter = (now.month - 1) // 3
            return [f"Q{(current_quarter - 3 + i + 4) % 4 + 1}" for i in range(4)]
        case "ALL":
            return [str(now.year - (3 - i)) for i in range(4)]

    raise UnknownViewModeError(period)


def process_revenue_data(reservations: Iterable | None, now: datetime | None = None) -> dict[str, dict] | None:
    """Horizon series for a raw reservation feed, as plain dicts.

    Returns None when there is no feed at all.
    """
    if reservations is None:
        return None

    records = parse_records(reservations)
    series = RevenueBucketAggregator().aggregate(records, now)
    return {key: s.to_dict() for key, s in series.items()}


def revenue_in_range(
    records: Iterable[RevenueRecord],
    start: datetime | None = None,
    end: datetime | None = None,
) -> float:
    """Sum of accepted record amounts with arrival in [start, end]."""
    total = 0.0
    for r in records:
        if not r.accepted:
            continue
        if start is not None and r.arrival_date < start:
            continue
        if end is not None and r.arrival_date > end:
            continue
        total += r.amount
    return total
