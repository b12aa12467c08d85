"""Restaurant schemas - read-only projections of restaurant records."""

from datetime import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PriceTier(str, Enum):
    """Price band shown on listings."""

    CHEAP = "CHEAP"
    REGULAR = "REGULAR"
    EXPENSIVE = "EXPENSIVE"


class LocationSchema(BaseModel):
    """A named place restaurants are grouped by."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CuisineSchema(BaseModel):
    """A named cuisine category."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RestaurantDetail(BaseModel):
    """Everything the restaurant detail page needs."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    description: str
    images: list[str] = Field(default_factory=list)
    main_image: str
    open_time: time
    close_time: time
    price: PriceTier
    location: LocationSchema
    cuisine: CuisineSchema


class RestaurantCard(BaseModel):
    """Compact projection used by the browse listing."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    main_image: str
    price: PriceTier
    location: LocationSchema
    cuisine: CuisineSchema
