"""
Custom managers for per-user data.

UserScopedManager filters queries by the authenticated caller.
"""

from typing import TYPE_CHECKING, TypeVar

from django.db import models

if TYPE_CHECKING:
    from django.http import HttpRequest

    from .models import UserScopedModel

_T = TypeVar("_T", bound="UserScopedModel")


class UserScopedManager(models.Manager[_T]):
    """
    Manager that filters by owner.

    Usage in views:
        # Scoped to request.user
        bookings = Booking.objects.for_user(request).all()

    SECURITY: Always use for_user() in views, never raw querysets.
    """

    def for_user(self, request: "HttpRequest") -> models.QuerySet[_T]:
        """
        Filter queryset by the user attached to the request.

        Args:
            request: HttpRequest with an authenticated .user

        Returns:
            QuerySet filtered to the request's user

        Raises:
            ValueError: If the request is not authenticated
        """
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            msg = "Request has no authenticated user. Is the view login-protected?"
            raise ValueError(msg)
        return self.filter(user=user)
