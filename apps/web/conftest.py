"""
Pytest configuration for Django app tests.
"""

from django.contrib.auth import get_user_model
from django.core.cache import cache

import pytest


@pytest.fixture(autouse=True)
def _clear_cache():
    """Restaurant lookups are cached; start every test cold."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(db):
    """Create a test diner."""
    User = get_user_model()
    return User.objects.create_user(
        username="testuser",
        email="testuser@example.com",
        password="testpass123",
        city="ottawa",
    )


@pytest.fixture
def other_user(db):
    """A second diner, for ownership checks."""
    User = get_user_model()
    return User.objects.create_user(
        username="otheruser",
        email="otheruser@example.com",
        password="testpass123",
    )
