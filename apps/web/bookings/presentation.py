"""
Booking list presentation - state to view model.

"now" is always passed in so the future/past split can be tested without
a clock. Date and time labels follow Django's active timezone.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from django.utils import timezone

from tablebook_schemas import Booking

if TYPE_CHECKING:
    from apps.web.bookings.controller import BookingListState

ViewKind = Literal["loading", "error", "empty", "list"]


def is_upcoming(booking_date: datetime, now: datetime) -> bool:
    """True when the booking is at or after now (i.e. still cancellable)."""
    return booking_date >= now


def format_booking_date(value: datetime) -> str:
    """Long form date in the active timezone, e.g. "January 1, 2099"."""
    value = timezone.localtime(value)
    return f"{value:%B} {value.day}, {value:%Y}"


def format_booking_time(value: datetime) -> str:
    """12-hour clock with AM/PM in the active timezone, e.g. "07:30 PM"."""
    return timezone.localtime(value).strftime("%I:%M %p")


@dataclass(frozen=True)
class BookingCard:
    """One rendered booking."""

    id: int
    restaurant_name: str
    image_url: str | None
    date_label: str
    time_label: str
    party_size: int
    cancellable: bool
    confirm_pending: bool = False


@dataclass(frozen=True)
class BookingListView:
    """Everything a template needs to draw the reservation list."""

    kind: ViewKind
    error: str | None = None
    success: str | None = None
    cards: list[BookingCard] = field(default_factory=list)
    confirm_id: int | None = None
    cancelling_id: int | None = None

    @property
    def show_banners(self) -> bool:
        return self.kind in ("empty", "list")


def build_card(
    booking: Booking, now: datetime, confirm_id: int | None = None
) -> BookingCard:
    """Render one booking as a card; only upcoming cards can hold the dialog."""
    cancellable = is_upcoming(booking.date, now)
    return BookingCard(
        id=booking.id,
        restaurant_name=booking.restaurant_name,
        image_url=booking.restaurant_image or None,
        date_label=format_booking_date(booking.date),
        time_label=format_booking_time(booking.date),
        party_size=booking.party_size,
        cancellable=cancellable,
        confirm_pending=cancellable and confirm_id == booking.id,
    )


def build_view(state: "BookingListState", now: datetime) -> BookingListView:
    """
    Map controller state to what should be on screen.

    Loading shows only a spinner. A failed initial load shows only its
    error. Otherwise banners are shown alongside either the empty message
    or the cards.
    """
    if state.loading:
        return BookingListView(kind="loading")

    if state.load_failed and state.error:
        return BookingListView(kind="error", error=state.error)

    if not state.bookings:
        return BookingListView(kind="empty", error=state.error, success=state.success)

    cards = [build_card(b, now, state.confirm_id) for b in state.bookings]
    return BookingListView(
        kind="list",
        error=state.error,
        success=state.success,
        cards=cards,
        confirm_id=next((c.id for c in cards if c.confirm_pending), None),
        cancelling_id=state.cancelling_id,
    )
