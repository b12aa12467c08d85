"""
Reservations API views.

GET    /api/reservations        -> caller's confirmed bookings
DELETE /api/reservations/{id}   -> cancel one booking

Errors always use the body {"error": "..."}.
"""

import logging
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from tablebook_schemas import BookingCancelled

from apps.web.bookings.services import (
    BookingNotCancellableError,
    BookingNotFoundError,
    cancel_booking,
    list_bookings,
)
from apps.web.core.decorators import json_login_required

logger = logging.getLogger(__name__)


def _error(message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": message}, status=status)


@require_GET
@json_login_required
def reservation_list(request: HttpRequest) -> JsonResponse:
    """
    GET /api/reservations

    Returns a JSON array of bookings with camelCase keys.
    """
    bookings = list_bookings(request)
    data: list[dict[str, Any]] = [
        b.model_dump(mode="json", by_alias=True) for b in bookings
    ]
    return JsonResponse(data, safe=False)


@csrf_exempt
@require_http_methods(["DELETE"])
@json_login_required
def reservation_detail(request: HttpRequest, booking_id: int) -> JsonResponse:
    """
    DELETE /api/reservations/{id}

    Cancels the booking. Repeating the call on a cancelled booking is a 200.
    """
    try:
        booking = cancel_booking(request, booking_id)
    except BookingNotFoundError as e:
        return _error(e.message, status=404)
    except BookingNotCancellableError as e:
        logger.info("Refused cancellation of booking %s: %s", booking_id, e.message)
        return _error(e.message, status=400)

    return JsonResponse(BookingCancelled(id=booking.pk).model_dump(mode="json"))
