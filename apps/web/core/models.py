"""
Core models - users and shared abstract bases.

Bookings and other per-person data inherit from UserScopedModel.
"""

from django.contrib.auth.models import AbstractUser
from django.db import models

from .managers import UserScopedManager


class User(AbstractUser):
    """
    Custom user model for diners.

    City and phone prefill the booking form on the restaurant page.
    """

    city = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=20, blank=True)

    class Meta:
        ordering = ["username"]

    def __str__(self) -> str:
        return self.username


class TimestampedModel(models.Model):
    """Abstract base adding created/updated timestamps."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class UserScopedModel(TimestampedModel):
    """
    Abstract base for records owned by a single user.

    Provides:
    - Automatic user FK
    - UserScopedManager for filtered queries
    - Created/updated timestamps
    """

    user = models.ForeignKey(
        "core.User",
        on_delete=models.CASCADE,
        related_name="%(class)ss",  # e.g., user.bookings
    )

    objects = UserScopedManager()

    class Meta:
        abstract = True
