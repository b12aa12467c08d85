"""
URL routing for the reservations API.
"""

from django.urls import path

from apps.web.bookings import api

app_name = "reservations_api"

urlpatterns = [
    path("reservations", api.reservation_list, name="list"),
    path("reservations/<int:booking_id>", api.reservation_detail, name="detail"),
]
