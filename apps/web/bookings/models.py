"""
Booking models - table reservations owned by a diner.

Cancelling flips status to CANCELLED; rows are never deleted so the
restaurant keeps its history.
"""

from django.core.validators import MinValueValidator
from django.db import models

from apps.web.core.models import UserScopedModel
from apps.web.restaurant.models import Restaurant


class BookingStatus(models.TextChoices):
    """Booking lifecycle status."""

    CONFIRMED = "confirmed", "Confirmed"
    CANCELLED = "cancelled", "Cancelled"


class Booking(UserScopedModel):
    """A reserved table at a restaurant for a date/time and party size."""

    restaurant = models.ForeignKey(
        Restaurant,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    booking_time = models.DateTimeField(help_text="Scheduled date and time")
    party_size = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])

    # Booker details (may differ from the account holder)
    booker_first_name = models.CharField(max_length=100)
    booker_last_name = models.CharField(max_length=100)
    booker_email = models.EmailField()
    booker_phone = models.CharField(max_length=20)
    booker_occasion = models.CharField(max_length=100, blank=True)
    booker_request = models.TextField(blank=True)

    status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.CONFIRMED,
    )
    cancelled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["booking_time", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(party_size__gte=1),
                name="booking_party_size_positive",
            ),
        ]
        indexes = [
            models.Index(
                fields=["user", "status", "booking_time"],
                name="booking_user_status_time_idx",
            ),
        ]

    def __str__(self) -> str:
        when = f"{self.booking_time:%Y-%m-%d %H:%M}"
        return f"{self.restaurant.name} @ {when} ({self.party_size})"

    @property
    def is_cancelled(self) -> bool:
        return self.status == BookingStatus.CANCELLED
