"""
Tests for account views.
"""

from urllib.parse import urlencode

from django.test import Client as DjangoTestClient
from django.urls import reverse

import pytest


@pytest.mark.django_db
class TestLoginView:
    """Tests for the login view."""

    def test_login_page_renders(self):
        """Login page should render for anonymous users."""
        http_client = DjangoTestClient()
        response = http_client.get(reverse("accounts:login"))
        assert response.status_code == 200
        assert b"Sign in" in response.content

    def test_login_redirects_authenticated_user(self, user):
        """Authenticated users should be sent to their reservations."""
        http_client = DjangoTestClient()
        http_client.force_login(user)
        response = http_client.get(reverse("accounts:login"))
        assert response.status_code == 302
        assert response.url == reverse("bookings:list")

    def test_login_with_valid_credentials(self, user):
        """Valid credentials should log user in and redirect."""
        http_client = DjangoTestClient()
        response = http_client.post(
            reverse("accounts:login"),
            {"username": "testuser", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == reverse("bookings:list")

    def test_login_with_invalid_credentials(self, user):
        """Invalid credentials should show error."""
        http_client = DjangoTestClient()
        response = http_client.post(
            reverse("accounts:login"),
            {"username": "testuser", "password": "wrongpass"},
        )
        assert response.status_code == 200
        assert b"Invalid username or password" in response.content

    def test_login_respects_next_parameter(self, user):
        """Login should redirect to 'next' URL after success."""
        http_client = DjangoTestClient()
        next_url = "/restaurants/"
        response = http_client.post(
            f"{reverse('accounts:login')}?next={next_url}",
            {"username": "testuser", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == next_url

    def test_login_blocks_open_redirect(self, user):
        """External 'next' URLs fall back to the reservations page."""
        http_client = DjangoTestClient()
        response = http_client.post(
            f"{reverse('accounts:login')}?next=//evil.example.com/",
            {"username": "testuser", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == reverse("bookings:list")

    @pytest.mark.parametrize(
        "next_url",
        ["https://evil.example.com/", "/\\evil.example.com/", "javascript:alert(1)"],
    )
    def test_login_rejects_foreign_next_urls(self, user, next_url):
        """Only same-host next URLs are followed."""
        http_client = DjangoTestClient()
        response = http_client.post(
            f"{reverse('accounts:login')}?{urlencode({'next': next_url})}",
            {"username": "testuser", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == reverse("bookings:list")


@pytest.mark.django_db
class TestLogoutView:
    """Tests for the logout view."""

    def test_logout_redirects_to_listing(self, user):
        http_client = DjangoTestClient()
        http_client.force_login(user)
        response = http_client.get(reverse("accounts:logout"))
        assert response.status_code == 302
        assert response.url == reverse("restaurant:home")

    def test_logout_ends_session(self, user):
        http_client = DjangoTestClient()
        http_client.force_login(user)
        http_client.get(reverse("accounts:logout"))
        response = http_client.get(reverse("bookings:list"))
        assert response.status_code == 302
