"""Revenue domain entities - accepted records and computed series."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity

# Reservation statuses that count towards revenue
VALID_STATUSES = frozenset({"new", "modified", "ownerStay"})

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class RevenueRecord(BaseEntity):
    """One reservation reduced to what the aggregator needs."""

    arrival_date: datetime
    amount: float
    status: str

    @property
    def accepted(self) -> bool:
        return self.status in VALID_STATUSES


@dataclass
class Bucket(BaseEntity):
    """Running total for one sub-interval of a horizon."""

    index: int
    total: float = 0.0


@dataclass(frozen=True)
class HorizonSeries(BaseEntity):
    """Rounded bucket values and total for one horizon."""

    data: list[int]
    total: int


@dataclass(frozen=True)
class MonthlyEntry(BaseEntity):
    """A single month of a monthly revenue series."""

    label: str
    value: float
    year: int | None = None


@dataclass(frozen=True)
class ViewSeries(BaseEntity):
    """Fixed-length chart series for one view mode."""

    mode: str
    labels: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    years: list[int] = field(default_factory=list)
    total: float = 0
