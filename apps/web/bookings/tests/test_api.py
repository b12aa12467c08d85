"""
Integration tests for the reservations API.
"""

from datetime import timedelta

from django.test import Client as DjangoClient
from django.utils import timezone

import pytest

from apps.web.bookings.models import BookingStatus
from apps.web.bookings.tests.factories import BookingFactory


@pytest.fixture
def api_client(user) -> DjangoClient:
    """Django test client logged in as the test diner."""
    http_client = DjangoClient()
    http_client.force_login(user)
    return http_client


@pytest.mark.django_db
class TestReservationListApi:
    """Tests for GET /api/reservations."""

    def test_requires_login(self):
        response = DjangoClient().get("/api/reservations")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_returns_camel_case_array(self, api_client: DjangoClient, user):
        booking = BookingFactory(user=user, party_size=3)

        response = api_client.get("/api/reservations")

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert len(data) == 1
        item = data[0]
        assert set(item) == {
            "id",
            "restaurantName",
            "restaurantImage",
            "date",
            "partySize",
        }
        assert item["id"] == booking.pk
        assert item["restaurantName"] == booking.restaurant.name
        assert item["restaurantImage"] == booking.restaurant.main_image
        assert item["partySize"] == 3

    def test_empty_list(self, api_client: DjangoClient):
        response = api_client.get("/api/reservations")

        assert response.status_code == 200
        assert response.json() == []

    def test_does_not_leak_other_users_bookings(
        self, api_client: DjangoClient, other_user
    ):
        BookingFactory(user=other_user)

        response = api_client.get("/api/reservations")

        assert response.json() == []


@pytest.mark.django_db
class TestReservationDeleteApi:
    """Tests for DELETE /api/reservations/{id}."""

    def test_requires_login(self, user):
        booking = BookingFactory(user=user)

        response = DjangoClient().delete(f"/api/reservations/{booking.pk}")

        assert response.status_code == 401

    def test_cancels_booking(self, api_client: DjangoClient, user):
        booking = BookingFactory(user=user)

        response = api_client.delete(f"/api/reservations/{booking.pk}")

        assert response.status_code == 200
        assert response.json() == {"id": booking.pk, "status": "cancelled"}
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CANCELLED

        listed = api_client.get("/api/reservations").json()
        assert booking.pk not in [b["id"] for b in listed]

    def test_repeat_delete_is_ok(self, api_client: DjangoClient, user):
        booking = BookingFactory(user=user)
        api_client.delete(f"/api/reservations/{booking.pk}")

        response = api_client.delete(f"/api/reservations/{booking.pk}")

        assert response.status_code == 200

    def test_other_users_booking_is_404(self, api_client: DjangoClient, other_user):
        booking = BookingFactory(user=other_user)

        response = api_client.delete(f"/api/reservations/{booking.pk}")

        assert response.status_code == 404
        assert response.json() == {"error": "Reservation not found"}
        booking.refresh_from_db()
        assert booking.status == BookingStatus.CONFIRMED

    def test_past_booking_is_400(self, api_client: DjangoClient, user):
        booking = BookingFactory(
            user=user, booking_time=timezone.now() - timedelta(days=1)
        )

        response = api_client.delete(f"/api/reservations/{booking.pk}")

        assert response.status_code == 400
        assert response.json() == {"error": "Cannot cancel a past reservation"}

    def test_get_on_detail_not_allowed(self, api_client: DjangoClient, user):
        booking = BookingFactory(user=user)

        response = api_client.get(f"/api/reservations/{booking.pk}")

        assert response.status_code == 405
