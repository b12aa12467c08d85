"""
URL routing for restaurant pages.
"""

from django.urls import path

from apps.web.restaurant import views

app_name = "restaurant"

urlpatterns = [
    path("", views.restaurant_list, name="home"),
    path("restaurants/", views.restaurant_list, name="list"),
    path("restaurant/<slug:slug>/", views.restaurant_layout, name="detail"),
]
