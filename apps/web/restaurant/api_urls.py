"""
URL routing for the public restaurant API.
"""

from django.urls import path

from apps.web.restaurant import views

app_name = "restaurant_api"

urlpatterns = [
    path("restaurants/<slug:slug>", views.restaurant_detail_api, name="detail"),
]
