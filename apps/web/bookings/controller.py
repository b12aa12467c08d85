"""
Booking list controller - fetch, confirm, cancel, reconcile.

Holds the client-side state of a diner's reservation list and drives it
through the reservations API. Every failure ends up as banner state; none
escape to the caller.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from django.template.loader import render_to_string
from django.utils import timezone

from tablebook_schemas import Booking

from apps.web.bookings.client import ReservationsClient
from apps.web.bookings.exceptions import ReservationAPIError, ReservationError
from apps.web.bookings.presentation import BookingListView, build_view, is_upcoming

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load bookings"
CANCEL_FAILED_MESSAGE = "Failed to cancel booking"
CANCEL_SUCCESS_MESSAGE = "Reservation cancelled successfully."


@dataclass
class BookingListState:
    """
    Mutable state behind the list.

    confirm_id is the single booking awaiting confirmation (None when no
    dialog is open). cancelling_id is the booking whose DELETE is in flight.
    """

    bookings: list[Booking] = field(default_factory=list)
    loading: bool = True
    load_failed: bool = False
    error: str | None = None
    success: str | None = None
    confirm_id: int | None = None
    cancelling_id: int | None = None

    def contains(self, booking_id: int) -> bool:
        return any(b.id == booking_id for b in self.bookings)


class BookingListController:
    """
    Controller for a diner's reservation list.

    Usage:
        async with ReservationsClient(base_url, cookies=session) as api:
            controller = BookingListController(api)
            await controller.load_bookings()
            controller.request_cancel(5)
            await controller.confirm_cancel(5)
    """

    def __init__(self, client: ReservationsClient) -> None:
        self.client = client
        self.state = BookingListState()

    @property
    def bookings(self) -> list[Booking]:
        return self.state.bookings

    # =========================================================================
    # Loading
    # =========================================================================

    async def load_bookings(self) -> None:
        """Fetch the list once; replaces state on success."""
        state = self.state
        state.loading = True
        try:
            state.bookings = await self.client.list_bookings()
            state.load_failed = False
        except ReservationAPIError as e:
            state.load_failed = True
            state.error = e.message
        except ReservationError as e:
            logger.warning("Loading bookings failed: %s", e.message)
            state.load_failed = True
            state.error = LOAD_FAILED_MESSAGE
        except Exception:
            logger.exception("Unexpected error loading bookings")
            state.load_failed = True
            state.error = LOAD_FAILED_MESSAGE
        finally:
            state.loading = False

    # =========================================================================
    # Cancellation
    # =========================================================================

    def request_cancel(self, booking_id: int, now: datetime | None = None) -> None:
        """
        Open the confirmation dialog for a booking (replaces any other).

        Only listed upcoming bookings can be cancelled; anything else leaves
        the dialog as it was.
        """
        now = now or timezone.now()
        booking = next((b for b in self.state.bookings if b.id == booking_id), None)
        if booking is None or not is_upcoming(booking.date, now):
            return
        self.state.confirm_id = booking_id

    def abort_cancel(self) -> None:
        """Close the confirmation dialog without cancelling."""
        self.state.confirm_id = None

    async def confirm_cancel(self, booking_id: int) -> None:
        """
        Cancel a booking through the API.

        Only the booking picked with request_cancel can be confirmed. The
        list only changes after the server confirms. While a DELETE is in
        flight further confirmations are ignored, and confirming an id that
        is no longer listed does nothing.
        """
        state = self.state
        if state.confirm_id != booking_id:
            logger.debug("Ignoring unrequested cancel of %s", booking_id)
            return

        if state.cancelling_id is not None:
            logger.debug(
                "Ignoring cancel of %s while %s is in flight",
                booking_id,
                state.cancelling_id,
            )
            return

        if not state.contains(booking_id):
            state.confirm_id = None
            return

        state.error = None
        state.success = None
        state.cancelling_id = booking_id
        try:
            await self.client.cancel_booking(booking_id)
            state.bookings = [b for b in state.bookings if b.id != booking_id]
            state.success = CANCEL_SUCCESS_MESSAGE
        except ReservationAPIError as e:
            state.error = e.message
        except ReservationError as e:
            logger.warning("Cancelling booking %s failed: %s", booking_id, e.message)
            state.error = CANCEL_FAILED_MESSAGE
        except Exception:
            logger.exception("Unexpected error cancelling booking %s", booking_id)
            state.error = CANCEL_FAILED_MESSAGE
        finally:
            state.confirm_id = None
            state.cancelling_id = None

    # =========================================================================
    # Banners
    # =========================================================================

    def dismiss_error(self) -> None:
        self.state.error = None

    def dismiss_success(self) -> None:
        self.state.success = None

    # =========================================================================
    # Rendering
    # =========================================================================

    def view(self, now: datetime | None = None) -> BookingListView:
        """Current view model; now defaults to the wall clock."""
        return build_view(self.state, now or timezone.now())

    def render(self, now: datetime | None = None) -> str:
        """Render the list to HTML with the shared reservation list template."""
        return render_to_string(
            "bookings/reservation_list.html",
            {"view": self.view(now)},
        )
