"""
URL configuration for Tablebook.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("accounts/", include("apps.web.accounts.urls")),
    path("reservations/", include("apps.web.bookings.urls")),
    # Public API endpoints
    path("api/", include("apps.web.bookings.api_urls")),
    path("api/", include("apps.web.restaurant.api_urls")),
    # Restaurant pages (root)
    path("", include("apps.web.restaurant.urls")),
]
