"""Revenue API response schemas."""

from pydantic import BaseModel


class PeriodItem(BaseModel):
    """Bucketed revenue for one horizon."""

    period: str
    labels: list[str]
    data: list[int]
    total: int


class RevenueSummaryResponse(BaseModel):
    """All horizons of a reservation feed."""

    items: list[PeriodItem]
    total_records: int


class ChartViewResponse(BaseModel):
    """One fixed-shape chart view."""

    mode: str
    labels: list[str]
    values: list[float]
    years: list[int]
    total: float
