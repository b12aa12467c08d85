"""Reservation schemas - data contracts for the reservations API."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class Booking(BaseModel):
    """
    A booking as seen by the person who made it.

    Wire names are camelCase (restaurantName, partySize, ...) to match the
    JSON the reservations API serves; attributes are snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    restaurant_name: str = Field(alias="restaurantName")
    restaurant_image: str | None = Field(default=None, alias="restaurantImage")
    date: datetime
    party_size: PositiveInt = Field(alias="partySize")

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Timestamps without an offset are read as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class BookingCancelled(BaseModel):
    """Response body for a successful cancellation."""

    id: int
    status: str = "cancelled"


class ErrorResponse(BaseModel):
    """Error body returned by every JSON endpoint on failure."""

    error: str
