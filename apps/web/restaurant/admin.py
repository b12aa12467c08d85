"""Admin registration for restaurant models."""

from django.contrib import admin

from apps.web.restaurant.models import Cuisine, Location, Restaurant


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin for locations."""

    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Cuisine)
class CuisineAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin for cuisines."""

    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Restaurant)
class RestaurantAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin for restaurant listings."""

    list_display = ["name", "slug", "location", "cuisine", "price"]
    list_filter = ["price", "location", "cuisine"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ["created_at", "updated_at"]
