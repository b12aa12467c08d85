"""
Reservation page URL routes.
"""

from django.urls import path

from . import views

app_name = "bookings"

urlpatterns = [
    path("", views.reservation_list, name="list"),
    path("<int:booking_id>/cancel/", views.cancel_reservation, name="cancel"),
]
