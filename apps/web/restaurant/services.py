"""
Restaurant lookup services.

The detail lookup returns an explicit result instead of raising for a
missing slug; views decide how to turn RestaurantNotFound into a 404.
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.core.cache import cache

from tablebook_schemas import RestaurantCard, RestaurantDetail

from apps.web.restaurant.models import PriceTier, Restaurant

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "restaurant:slug:"


@dataclass(frozen=True)
class RestaurantFound:
    """Lookup matched a restaurant."""

    restaurant: RestaurantDetail


@dataclass(frozen=True)
class RestaurantNotFound:
    """No restaurant has the requested slug."""

    slug: str


RestaurantLookup = RestaurantFound | RestaurantNotFound


def _cache_key(slug: str) -> str:
    return f"{CACHE_KEY_PREFIX}{slug}"


def get_restaurant_by_slug(slug: str) -> RestaurantLookup:
    """
    Look up a restaurant by its slug.

    Found results are cached for RESTAURANT_CACHE_SECONDS. Misses are not
    cached so a newly published restaurant shows up immediately.

    Args:
        slug: Non-empty restaurant slug from the route

    Returns:
        RestaurantFound with the detail projection, or RestaurantNotFound
    """
    key = _cache_key(slug)
    cached = cache.get(key)
    if cached is not None:
        return RestaurantFound(RestaurantDetail.model_validate(cached))

    restaurant = (
        Restaurant.objects.select_related("location", "cuisine")
        .filter(slug=slug)
        .first()
    )
    if restaurant is None:
        logger.info("Restaurant lookup miss for slug %s", slug)
        return RestaurantNotFound(slug)

    detail = RestaurantDetail.model_validate(restaurant)
    cache.set(
        key,
        detail.model_dump(mode="json"),
        timeout=settings.RESTAURANT_CACHE_SECONDS,
    )
    return RestaurantFound(detail)


def invalidate_restaurant(slug: str) -> None:
    """Drop a cached lookup, e.g. after the restaurant is edited."""
    cache.delete(_cache_key(slug))


def list_restaurants(
    location: str | None = None,
    cuisine: str | None = None,
    price: str | None = None,
) -> list[RestaurantCard]:
    """
    Browse listing with optional filters.

    Location and cuisine match by name, case-insensitively. Unknown price
    values are ignored rather than rejected.
    """
    qs = Restaurant.objects.select_related("location", "cuisine")

    if location:
        qs = qs.filter(location__name__iexact=location)
    if cuisine:
        qs = qs.filter(cuisine__name__iexact=cuisine)
    if price and price.upper() in PriceTier.values:
        qs = qs.filter(price=price.upper())

    return [RestaurantCard.model_validate(r) for r in qs.order_by("name")]
