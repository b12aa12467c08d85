"""
Booking services - listing and cancelling a diner's reservations.

Shared by the JSON API and the server-rendered reservations page.
"""

import logging
from datetime import datetime, timedelta

from django.conf import settings
from django.db import transaction
from django.http import HttpRequest
from django.utils import timezone

from tablebook_schemas import Booking as BookingSchema

from apps.web.bookings.models import Booking, BookingStatus

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base exception for booking operations."""

    def __init__(self, message: str, booking_id: int | None = None) -> None:
        self.message = message
        self.booking_id = booking_id
        super().__init__(message)


class BookingNotFoundError(BookingError):
    """No booking with that id belongs to the caller."""


class BookingNotCancellableError(BookingError):
    """The booking exists but can no longer be cancelled."""


def serialize_booking(booking: Booking) -> BookingSchema:
    """Project a Booking row into the client-visible schema."""
    return BookingSchema(
        id=booking.pk,
        restaurant_name=booking.restaurant.name,
        restaurant_image=booking.restaurant.main_image or None,
        date=booking.booking_time,
        party_size=booking.party_size,
    )


def list_bookings(request: HttpRequest) -> list[BookingSchema]:
    """Confirmed bookings for the caller, soonest first."""
    bookings = (
        Booking.objects.for_user(request)
        .filter(status=BookingStatus.CONFIRMED)
        .select_related("restaurant")
        .order_by("booking_time", "id")
    )
    return [serialize_booking(b) for b in bookings]


def _cutoff() -> timedelta:
    return timedelta(hours=settings.BOOKING_CANCELLATION_CUTOFF_HOURS)


def cancel_booking(
    request: HttpRequest, booking_id: int, now: datetime | None = None
) -> Booking:
    """
    Cancel one of the caller's bookings.

    Cancelling an already-cancelled booking succeeds without changes, so a
    repeated DELETE is harmless.

    Args:
        request: Authenticated request (scopes the lookup to its user)
        booking_id: Booking primary key
        now: Reference time, defaults to timezone.now()

    Returns:
        The (now cancelled) booking

    Raises:
        BookingNotFoundError: No such booking for this user
        BookingNotCancellableError: Booking is in the past or inside the cutoff
    """
    now = now or timezone.now()

    with transaction.atomic():
        try:
            booking = (
                Booking.objects.for_user(request)
                .select_for_update()
                .get(pk=booking_id)
            )
        except Booking.DoesNotExist as exc:
            raise BookingNotFoundError("Reservation not found", booking_id) from exc

        if booking.is_cancelled:
            logger.info("Booking %s already cancelled", booking_id)
            return booking

        if booking.booking_time < now:
            raise BookingNotCancellableError(
                "Cannot cancel a past reservation", booking_id
            )

        cutoff = _cutoff()
        if cutoff and booking.booking_time - now < cutoff:
            hours = settings.BOOKING_CANCELLATION_CUTOFF_HOURS
            raise BookingNotCancellableError(
                f"Cannot cancel within {hours} hours", booking_id
            )

        booking.status = BookingStatus.CANCELLED
        booking.cancelled_at = now
        booking.save(update_fields=["status", "cancelled_at", "updated_at"])

    logger.info(
        "Cancelled booking %s at %s for user %s",
        booking_id,
        booking.restaurant.name,
        booking.user_id,
    )
    return booking
