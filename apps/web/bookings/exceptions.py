"""Reservations client exceptions."""


class ReservationError(Exception):
    """Base exception for reservations API client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ReservationAPIError(ReservationError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class ReservationTransportError(ReservationError):
    """The request never got an HTTP answer (DNS, connect, timeout...)."""
