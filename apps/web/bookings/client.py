"""Reservations API client - async HTTP access to /api/reservations."""

import logging
from typing import Any

from django.conf import settings

import httpx
from pydantic import TypeAdapter, ValidationError
from tablebook_schemas import Booking

from apps.web.bookings.exceptions import (
    ReservationAPIError,
    ReservationTransportError,
)

logger = logging.getLogger(__name__)

_BOOKING_LIST = TypeAdapter(list[Booking])


class ReservationsClient:
    """
    Client for the reservations API.

    The caller's identity is passed in explicitly, as cookies or headers
    (e.g. a session cookie or an Authorization header), never read from
    ambient state.
    """

    LIST_PATH = "/api/reservations"
    DETAIL_PATH = "/api/reservations/{booking_id}"

    def __init__(
        self,
        base_url: str | None = None,
        *,
        cookies: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Scheme and host of the web app, e.g. https://tablebook.io.
                Defaults to settings.RESERVATIONS_API_BASE_URL.
            cookies: Credentials sent with every request
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
            http_client: Optional HTTP client for dependency injection (testing).
        """
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url or settings.RESERVATIONS_API_BASE_URL,
            cookies=cookies,
            headers=headers,
            timeout=timeout,
        )
        self._owns_client = http_client is None

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ReservationsClient":
        return self

    async def __aexit__(self, *_exc: Any) -> None:
        await self.close()

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    async def _request(self, method: str, url: str, fallback: str) -> httpx.Response:
        """
        Send a request and turn failures into ReservationError subclasses.

        Args:
            method: HTTP method
            url: Path relative to base_url
            fallback: Message used when the error body has no "error" field

        Raises:
            ReservationAPIError: Non-2xx response
            ReservationTransportError: Network-level failure
        """
        try:
            response = await self._client.request(method, url)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ReservationTransportError(f"Request failed: {e}") from e

        if response.is_success:
            return response

        raise ReservationAPIError(
            _error_message(response) or fallback,
            status_code=response.status_code,
            response_body=response.text,
        )

    # =========================================================================
    # Operations
    # =========================================================================

    async def list_bookings(self) -> list[Booking]:
        """
        GET /api/reservations

        Returns:
            Bookings in the order the API returned them.

        Raises:
            ReservationAPIError: Non-success status or malformed body
            ReservationTransportError: Network-level failure
        """
        response = await self._request(
            "GET", self.LIST_PATH, "Failed to fetch bookings"
        )
        try:
            return _BOOKING_LIST.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise ReservationAPIError(
                "Failed to fetch bookings",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    async def cancel_booking(self, booking_id: int) -> None:
        """
        DELETE /api/reservations/{id}

        Any 2xx counts as success; the body is ignored.

        Raises:
            ReservationAPIError: Non-success status
            ReservationTransportError: Network-level failure
        """
        await self._request(
            "DELETE",
            self.DETAIL_PATH.format(booking_id=booking_id),
            "Failed to cancel booking",
        )


def _error_message(response: httpx.Response) -> str | None:
    """Pull the "error" field out of a JSON error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("error")
        if isinstance(message, str) and message:
            return message
    return None
