"""Finance API schemas."""

from pydantic import BaseModel, Field


class FinancialsResultSchema(BaseModel):
    """Financial report totals for a date range."""

    owner_payout: float = Field(alias="ownerPayout", default=0)

    class Config:
        populate_by_name = True


class ListingFinancialsSchema(BaseModel):
    """Envelope of the listing financials report."""

    result: FinancialsResultSchema


class MonthlyRevenueSchema(BaseModel):
    """Month-by-month owner payout, newest month first."""

    labels: list[str] = []
    data: list[float] = []
    years: list[int] = []
