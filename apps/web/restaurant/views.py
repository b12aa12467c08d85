"""
Restaurant views - browse listing, detail layout, and the public detail API.

The detail page and API share get_restaurant_by_slug; both translate
RestaurantNotFound into a 404 here, at the edge.
"""

from typing import Any

from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.cache import cache_control
from django.views.decorators.http import require_GET

from tablebook_schemas import PriceTier, RestaurantDetail

from apps.web.restaurant.services import (
    RestaurantNotFound,
    get_restaurant_by_slug,
    list_restaurants,
)


def _json_response(data: dict[str, Any], status: int = 200) -> JsonResponse:
    """Create a JSON response."""
    return JsonResponse(data, status=status)


def _get_restaurant_or_404(slug: str) -> RestaurantDetail:
    """Resolve a slug or raise Http404."""
    result = get_restaurant_by_slug(slug)
    if isinstance(result, RestaurantNotFound):
        raise Http404(f"Restaurant '{slug}' not found")
    return result.restaurant


@require_GET
def restaurant_list(request: HttpRequest) -> HttpResponse:
    """
    GET /restaurants/

    Browse listing. Optional filters: ?location=&cuisine=&price=
    """
    filters = {
        "location": request.GET.get("location", "").strip() or None,
        "cuisine": request.GET.get("cuisine", "").strip() or None,
        "price": request.GET.get("price", "").strip() or None,
    }
    restaurants = list_restaurants(**filters)

    return render(
        request,
        "restaurant/list.html",
        {
            "restaurants": restaurants,
            "filters": filters,
            "price_tiers": [tier.value for tier in PriceTier],
        },
    )


@require_GET
def restaurant_layout(request: HttpRequest, slug: str) -> HttpResponse:
    """
    GET /restaurant/{slug}/

    Detail page: header with name and location, then the restaurant body.
    """
    restaurant = _get_restaurant_or_404(slug)
    return render(request, "restaurant/layout.html", {"restaurant": restaurant})


@require_GET
@cache_control(max_age=300, public=True)  # 5 minutes
def restaurant_detail_api(_request: HttpRequest, slug: str) -> JsonResponse:
    """
    GET /api/restaurants/{slug}

    Returns the restaurant detail projection.

    Cache: 5 minutes (listing data changes rarely)
    """
    result = get_restaurant_by_slug(slug)
    if isinstance(result, RestaurantNotFound):
        return _json_response({"error": "Restaurant not found"}, status=404)
    return _json_response(result.restaurant.model_dump(mode="json"))
