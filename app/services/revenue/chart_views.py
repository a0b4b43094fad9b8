"""Chart views - fixed-shape series assembled from monthly revenue."""

from collections.abc import Iterable, Mapping
from datetime import datetime

from loguru import logger

from app.models.revenue import MONTH_LABELS, MonthlyEntry, ViewSeries
from app.services.revenue import formulas
from app.services.revenue.errors import UnknownViewModeError
from settings import NOV_BACKFILL_RATIO

VIEW_MODES = ("6M", "YTD", "MTD", "ALL")


def parse_monthly_series(series: Mapping | Iterable[MonthlyEntry] | None) -> list[MonthlyEntry]:
    """Entries of a {labels, data, years} series, skipping malformed ones."""
    if series is None:
        return []
    if not isinstance(series, Mapping):
        return [e for e in series if isinstance(e, MonthlyEntry)]

    labels = series.get("labels") or []
    data = series.get("data") or []
    years = series.get("years") or []

    entries = []
    for i, label in enumerate(labels):
        if label not in MONTH_LABELS or i >= len(data):
            logger.warning("Skipping monthly entry #{}: label={!r}", i, label)
            continue

        value = data[i]
        if isinstance(value, bool):
            logger.warning("Skipping monthly entry #{}: value={!r}", i, value)
            continue
        if not isinstance(value, (int, float)):
            try:
                value = float(value)
            except (TypeError, ValueError):
                logger.warning("Skipping monthly entry #{}: value={!r}", i, value)
                continue

        year = years[i] if i < len(years) else None
        if year is not None:
            try:
                year = int(year)
            except (TypeError, ValueError):
                year = None

        entries.append(MonthlyEntry(label=label, value=value, year=year))
    return entries


def is_fixed_year(mode) -> bool:
    return isinstance(mode, int) or (isinstance(mode, str) and len(mode) == 4 and mode.isdigit())


class ChartViewAssembler:
    """Builds one gap-free series per view mode.

    Modes: "6M" (six trailing months), "YTD", "MTD", a calendar year such as
    "2024" (always 12 months), and "ALL" (same as "6M").
    """

    def __init__(self, backfill_ratio: float = NOV_BACKFILL_RATIO):
        self._backfill_ratio = backfill_ratio

    def assemble(self, series, mode: str | int, now: datetime | None = None) -> ViewSeries:
        """Place every source month into its canonical slot; missing months stay zero."""
        now = formulas.to_naive(now) if now else datetime.now()
        mode_key = str(mode)
        slots = self._slots(mode, now)
        entries = parse_monthly_series(series)

        values: list[float] = [0] * len(slots)
        filled = [False] * len(slots)
        total = 0

        for entry in entries:
            i = self._locate(slots, filled, entry.label, entry.year)
            if i is None:
                continue
            values[i] = entry.value
            filled[i] = True
            total += entry.value

        if mode_key in ("6M", "ALL") and self._missing_november(entries):
            dec = entries[0]
            i = self._locate(slots, filled, "Nov", dec.year)
            if i is not None:
                values[i] = formulas.round_revenue(dec.value * self._backfill_ratio)
                filled[i] = True
                total += values[i]
                logger.debug("Backfilled Nov {} from Dec value {}", dec.year, dec.value)

        return ViewSeries(
            mode=mode_key,
            labels=[label for label, _ in slots],
            values=values,
            years=[year for _, year in slots],
            total=total,
        )

    @staticmethod
    def _slots(mode, now: datetime) -> list[tuple[str, int]]:
        if is_fixed_year(mode):
            year = int(mode)
            return [(label, year) for label in MONTH_LABELS]

        match mode:
            case "6M" | "ALL":
                first = now.replace(day=1)
                months = [formulas.shift_months(first, -k) for k in range(5, -1, -1)]
                return [(MONTH_LABELS[m.month - 1], m.year) for m in months]
            case "YTD":
                return [(MONTH_LABELS[m], now.year) for m in range(now.month)]
            case "MTD":
                return [(MONTH_LABELS[now.month - 1], now.year)]

        raise UnknownViewModeError(mode)

    @staticmethod
    def _locate(slots: list[tuple[str, int]], filled: list[bool], label: str, year: int | None) -> int | None:
        for i, (slot_label, slot_year) in enumerate(slots):
            if filled[i] or slot_label != label:
                continue
            if year is None or year == slot_year:
                return i
        return None

    @staticmethod
    def _missing_november(entries: list[MonthlyEntry]) -> bool:
        # Upstream report drops November when it leads with December
        return len(entries) == 5 and entries[0].label == "Dec"
