"""
Seed locations, cuisines, and a starter set of restaurants.

Usage:
    uv run python apps/web/manage.py seed_restaurants
    uv run python apps/web/manage.py seed_restaurants --location ottawa

Safe to re-run: rows are matched on name (locations, cuisines) and slug
(restaurants) and updated in place.
"""

import logging
from datetime import time
from typing import Any

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.web.restaurant.models import Cuisine, Location, PriceTier, Restaurant

logger = logging.getLogger(__name__)

LOCATIONS = ["ottawa", "toronto", "niagara"]
CUISINES = ["indian", "italian", "mexican"]

RESTAURANTS: list[dict[str, Any]] = [
    {
        "name": "Vivaan - fine Indian",
        "slug": "vivaan-fine-indian-ottawa",
        "location": "ottawa",
        "cuisine": "indian",
        "price": PriceTier.REGULAR,
        "open_time": time(14, 30),
        "close_time": time(21, 30),
        "description": "Authentic Indian cuisine in the heart of the capital.",
    },
    {
        "name": "Milestones Grill",
        "slug": "milestones-grill-toronto",
        "location": "toronto",
        "cuisine": "italian",
        "price": PriceTier.EXPENSIVE,
        "open_time": time(12, 0),
        "close_time": time(23, 0),
        "description": "Handmade pasta and wood-fired mains.",
    },
    {
        "name": "El Catrin",
        "slug": "el-catrin-niagara",
        "location": "niagara",
        "cuisine": "mexican",
        "price": PriceTier.CHEAP,
        "open_time": time(11, 0),
        "close_time": time(22, 0),
        "description": "Tacos, mezcal, and a patio by the falls.",
    },
]

IMAGE_BASE = "https://images.tablebook.io/restaurants"


class Command(BaseCommand):
    help = "Seed locations, cuisines, and starter restaurants"

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument(
            "--location",
            help="Only seed restaurants in this location (default: all)",
        )

    def handle(self, *_args: Any, **options: Any) -> None:
        only_location = options.get("location")

        with transaction.atomic():
            locations = {
                name: Location.objects.get_or_create(name=name)[0] for name in LOCATIONS
            }
            cuisines = {
                name: Cuisine.objects.get_or_create(name=name)[0] for name in CUISINES
            }

            created = updated = 0
            for entry in RESTAURANTS:
                if only_location and entry["location"] != only_location:
                    continue

                slug = entry["slug"]
                _, was_created = Restaurant.objects.update_or_create(
                    slug=slug,
                    defaults={
                        "name": entry["name"],
                        "description": entry["description"],
                        "main_image": f"{IMAGE_BASE}/{slug}/main.jpg",
                        "images": [f"{IMAGE_BASE}/{slug}/{n}.jpg" for n in range(1, 4)],
                        "open_time": entry["open_time"],
                        "close_time": entry["close_time"],
                        "price": entry["price"],
                        "location": locations[entry["location"]],
                        "cuisine": cuisines[entry["cuisine"]],
                    },
                )
                if was_created:
                    created += 1
                else:
                    updated += 1

        logger.info("Seeded restaurants: %d created, %d updated", created, updated)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {created} new and {updated} existing restaurants"
            )
        )
