"""Tablebook Schemas - Pydantic models for data contracts."""

from tablebook_schemas.reservations import Booking, BookingCancelled, ErrorResponse
from tablebook_schemas.restaurants import (
    CuisineSchema,
    LocationSchema,
    PriceTier,
    RestaurantCard,
    RestaurantDetail,
)

__all__ = [
    # Reservations
    "Booking",
    "BookingCancelled",
    "ErrorResponse",
    # Restaurants
    "CuisineSchema",
    "LocationSchema",
    "PriceTier",
    "RestaurantCard",
    "RestaurantDetail",
]
