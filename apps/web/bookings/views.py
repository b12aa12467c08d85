"""
Reservation page views - server-rendered "My reservations".

Renders the same view model as BookingListController, built from the
database instead of the API. ?confirm={id} opens the dialog; banners come
from the messages framework.
"""

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from apps.web.bookings.controller import CANCEL_SUCCESS_MESSAGE, BookingListState
from apps.web.bookings.presentation import build_view
from apps.web.bookings.services import BookingError, cancel_booking, list_bookings


def _parse_confirm_id(raw: str | None) -> int | None:
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def _banners(request: HttpRequest) -> tuple[str | None, str | None]:
    """Latest (error, success) messages; reading them consumes them."""
    error = success = None
    for message in messages.get_messages(request):
        if message.level == messages.ERROR:
            error = str(message)
        elif message.level == messages.SUCCESS:
            success = str(message)
    return error, success


@login_required
@require_GET
def reservation_list(request: HttpRequest) -> HttpResponse:
    """
    GET /reservations/

    The caller's upcoming and past confirmed bookings.
    """
    bookings = list_bookings(request)
    error, success = _banners(request)

    confirm_id = _parse_confirm_id(request.GET.get("confirm"))
    if confirm_id is not None and not any(b.id == confirm_id for b in bookings):
        confirm_id = None

    state = BookingListState(
        bookings=bookings,
        loading=False,
        error=error,
        success=success,
        confirm_id=confirm_id,
    )
    view = build_view(state, timezone.now())

    return render(request, "bookings/reservations.html", {"view": view})


@login_required
@require_POST
def cancel_reservation(request: HttpRequest, booking_id: int) -> HttpResponse:
    """
    POST /reservations/{id}/cancel/

    Confirmed cancellation from the dialog; always redirects back to the list.
    """
    try:
        cancel_booking(request, booking_id)
    except BookingError as e:
        messages.error(request, e.message)
    else:
        messages.success(request, CANCEL_SUCCESS_MESSAGE)

    return redirect("bookings:list")
