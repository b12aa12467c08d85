"""Tests for booking services."""

from datetime import timedelta

from django.contrib.auth.models import AnonymousUser
from django.utils import timezone

import pytest

from apps.web.bookings.models import BookingStatus
from apps.web.bookings.services import (
    BookingNotCancellableError,
    BookingNotFoundError,
    cancel_booking,
    list_bookings,
)
from apps.web.bookings.tests.factories import BookingFactory


@pytest.fixture
def diner_request(rf, user):
    """A request made by the test diner."""
    request = rf.get("/")
    request.user = user
    return request


@pytest.mark.django_db
class TestListBookings:
    """Tests for list_bookings."""

    def test_returns_only_callers_confirmed_bookings(
        self, diner_request, user, other_user
    ):
        mine = BookingFactory(user=user)
        BookingFactory(user=user, status=BookingStatus.CANCELLED)
        BookingFactory(user=other_user)

        bookings = list_bookings(diner_request)

        assert [b.id for b in bookings] == [mine.pk]

    def test_projection_fields(self, diner_request, user):
        booking = BookingFactory(user=user, party_size=4)

        (result,) = list_bookings(diner_request)

        assert result.id == booking.pk
        assert result.restaurant_name == booking.restaurant.name
        assert result.restaurant_image == booking.restaurant.main_image
        assert result.date == booking.booking_time
        assert result.party_size == 4

    def test_ordered_soonest_first(self, diner_request, user):
        now = timezone.now()
        later = BookingFactory(user=user, booking_time=now + timedelta(days=10))
        sooner = BookingFactory(user=user, booking_time=now + timedelta(days=1))
        past = BookingFactory(user=user, booking_time=now - timedelta(days=3))

        ids = [b.id for b in list_bookings(diner_request)]

        assert ids == [past.pk, sooner.pk, later.pk]

    def test_anonymous_request_rejected(self, rf):
        request = rf.get("/")
        request.user = AnonymousUser()

        with pytest.raises(ValueError, match="no authenticated user"):
            list_bookings(request)


@pytest.mark.django_db
class TestCancelBooking:
    """Tests for cancel_booking."""

    def test_cancels_future_booking(self, diner_request, user):
        booking = BookingFactory(user=user)

        cancelled = cancel_booking(diner_request, booking.pk)

        booking.refresh_from_db()
        assert cancelled.pk == booking.pk
        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancelled_at is not None

    def test_other_users_booking_not_found(self, diner_request, other_user):
        booking = BookingFactory(user=other_user)

        with pytest.raises(BookingNotFoundError) as exc_info:
            cancel_booking(diner_request, booking.pk)

        assert exc_info.value.message == "Reservation not found"
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CONFIRMED

    def test_missing_booking_not_found(self, diner_request):
        with pytest.raises(BookingNotFoundError):
            cancel_booking(diner_request, 999_999)

    def test_past_booking_not_cancellable(self, diner_request, user):
        booking = BookingFactory(
            user=user, booking_time=timezone.now() - timedelta(hours=1)
        )

        with pytest.raises(BookingNotCancellableError) as exc_info:
            cancel_booking(diner_request, booking.pk)

        assert exc_info.value.message == "Cannot cancel a past reservation"

    def test_booking_exactly_now_is_cancellable(self, diner_request, user):
        now = timezone.now()
        booking = BookingFactory(user=user, booking_time=now)

        cancel_booking(diner_request, booking.pk, now=now)

        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED

    def test_already_cancelled_is_noop(self, diner_request, user):
        booking = BookingFactory(user=user)
        cancel_booking(diner_request, booking.pk)
        booking.refresh_from_db()
        first_cancelled_at = booking.cancelled_at

        cancel_booking(diner_request, booking.pk)

        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED
        assert booking.cancelled_at == first_cancelled_at

    def test_cutoff_window_refuses_cancellation(self, diner_request, user, settings):
        settings.BOOKING_CANCELLATION_CUTOFF_HOURS = 2
        booking = BookingFactory(
            user=user, booking_time=timezone.now() + timedelta(minutes=90)
        )

        with pytest.raises(BookingNotCancellableError) as exc_info:
            cancel_booking(diner_request, booking.pk)

        assert exc_info.value.message == "Cannot cancel within 2 hours"

    def test_outside_cutoff_window_allowed(self, diner_request, user, settings):
        settings.BOOKING_CANCELLATION_CUTOFF_HOURS = 2
        booking = BookingFactory(
            user=user, booking_time=timezone.now() + timedelta(hours=3)
        )

        cancel_booking(diner_request, booking.pk)

        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED
