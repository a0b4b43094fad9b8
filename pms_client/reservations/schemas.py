"""Reservation API schemas."""

from datetime import date, datetime, time

from pydantic import BaseModel, Field, field_validator, model_validator


class ReservationSchema(BaseModel):
    """Reservation as returned by the property-management API."""

    id: int | None = None
    listing_map_id: int | None = Field(alias="listingMapId", default=None)
    channel_name: str | None = Field(alias="channelName", default=None)
    status: str
    arrival_date: datetime = Field(alias="arrivalDate")
    departure_date: datetime | None = Field(alias="departureDate", default=None)
    airbnb_expected_payout_amount: float | None = Field(alias="airbnbExpectedPayoutAmount", default=None)
    total_price: float | None = Field(alias="totalPrice", default=None)

    class Config:
        populate_by_name = True

    @field_validator("arrival_date", "departure_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
        return value

    @model_validator(mode="after")
    def _require_amount(self):
        if self.amount is None:
            raise ValueError("reservation has neither a channel payout nor a total price")
        return self

    @property
    def amount(self) -> float | None:
        """Channel payout when the channel reports one, otherwise the total price."""
        if self.airbnb_expected_payout_amount is not None:
            return self.airbnb_expected_payout_amount
        return self.total_price
