"""Admin registration for booking models."""

from django.contrib import admin

from apps.web.bookings.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    """Admin for bookings."""

    list_display = [
        "restaurant",
        "user",
        "booking_time",
        "party_size",
        "status",
    ]
    list_filter = ["status", "restaurant"]
    search_fields = ["booker_email", "booker_last_name", "user__username"]
    readonly_fields = ["created_at", "updated_at", "cancelled_at"]
    date_hierarchy = "booking_time"
