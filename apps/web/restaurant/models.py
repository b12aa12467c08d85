"""
Restaurant models - Locations, cuisines, and restaurant listings.

Restaurants are addressed publicly by slug; numeric ids stay internal.
"""

from django.db import models

from apps.web.core.models import TimestampedModel


class PriceTier(models.TextChoices):
    """Price band shown on listings."""

    CHEAP = "CHEAP", "$$"
    REGULAR = "REGULAR", "$$$"
    EXPENSIVE = "EXPENSIVE", "$$$$"


class Location(TimestampedModel):
    """A named place (city or neighbourhood) restaurants are grouped by."""

    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Cuisine(TimestampedModel):
    """A named cuisine category (e.g., Italian, Mexican)."""

    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Restaurant(TimestampedModel):
    """
    A bookable restaurant listing.

    Opening hours are wall-clock times in the restaurant's own time zone.
    """

    name = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=200,
        unique=True,
        help_text="URL-safe identifier",
    )
    description = models.TextField(blank=True)
    main_image = models.URLField(max_length=500)
    images = models.JSONField(
        default=list,
        blank=True,
        help_text="Gallery image URLs",
    )
    open_time = models.TimeField()
    close_time = models.TimeField()
    price = models.CharField(
        max_length=20,
        choices=PriceTier.choices,
        default=PriceTier.REGULAR,
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.PROTECT,
        related_name="restaurants",
    )
    cuisine = models.ForeignKey(
        Cuisine,
        on_delete=models.PROTECT,
        related_name="restaurants",
    )

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(
                fields=["location", "cuisine"],
                name="restaurant_loc_cuisine_idx",
            ),
        ]

    def __str__(self) -> str:
        return self.name
