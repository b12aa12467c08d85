"""
Integration tests for restaurant pages and the detail API.
"""

from django.test import Client as DjangoClient

import pytest

from apps.web.restaurant.tests.factories import (
    CuisineFactory,
    LocationFactory,
    RestaurantFactory,
)


@pytest.fixture
def api_client() -> DjangoClient:
    """Django test client for requests."""
    return DjangoClient()


@pytest.fixture
def restaurant():
    return RestaurantFactory(
        name="Milestones Grill",
        slug="milestones-grill-toronto",
        location=LocationFactory(name="toronto"),
        cuisine=CuisineFactory(name="italian"),
    )


@pytest.mark.django_db
class TestRestaurantLayoutView:
    """Tests for GET /restaurant/{slug}/."""

    def test_renders_header_with_name_and_location(
        self, api_client: DjangoClient, restaurant
    ):
        response = api_client.get(f"/restaurant/{restaurant.slug}/")

        assert response.status_code == 200
        assert b"Milestones Grill" in response.content
        assert b"toronto" in response.content
        assert response.context["restaurant"].slug == restaurant.slug

    def test_unknown_slug_is_404(self, api_client: DjangoClient):
        response = api_client.get("/restaurant/nowhere/")

        assert response.status_code == 404


@pytest.mark.django_db
class TestRestaurantListView:
    """Tests for GET /restaurants/."""

    def test_lists_restaurants(self, api_client: DjangoClient, restaurant):
        response = api_client.get("/restaurants/")

        assert response.status_code == 200
        assert b"Milestones Grill" in response.content

    def test_root_serves_listing(self, api_client: DjangoClient, restaurant):
        response = api_client.get("/")

        assert response.status_code == 200
        assert b"Milestones Grill" in response.content

    def test_filters_narrow_results(self, api_client: DjangoClient, restaurant):
        response = api_client.get("/restaurants/", {"location": "ottawa"})

        assert response.status_code == 200
        assert b"Milestones Grill" not in response.content
        assert b"No restaurants match your search." in response.content


@pytest.mark.django_db
class TestRestaurantDetailApi:
    """Tests for GET /api/restaurants/{slug}."""

    def test_returns_projection(self, api_client: DjangoClient, restaurant):
        response = api_client.get(f"/api/restaurants/{restaurant.slug}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == restaurant.pk
        assert data["name"] == "Milestones Grill"
        assert data["slug"] == "milestones-grill-toronto"
        assert data["price"] == "REGULAR"
        assert data["location"]["name"] == "toronto"
        assert data["cuisine"]["name"] == "italian"
        assert data["open_time"] == "11:00:00"
        assert data["close_time"] == "22:00:00"
        assert data["images"] == restaurant.images

    def test_is_publicly_cacheable(self, api_client: DjangoClient, restaurant):
        response = api_client.get(f"/api/restaurants/{restaurant.slug}")

        assert "max-age=300" in response["Cache-Control"]
        assert "public" in response["Cache-Control"]

    def test_unknown_slug_returns_error_body(self, api_client: DjangoClient):
        response = api_client.get("/api/restaurants/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Restaurant not found"}

    def test_post_not_allowed(self, api_client: DjangoClient, restaurant):
        response = api_client.post(f"/api/restaurants/{restaurant.slug}")

        assert response.status_code == 405
