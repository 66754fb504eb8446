class BookingError(RuntimeError):
    """Base class for errors surfaced to the booking wizard."""
    pass


class VenueNotFoundError(BookingError):
    """Raised when the requested venue id is missing or cannot be resolved."""
    pass


class SessionNotFoundError(BookingError):
    """Raised when a wizard session id is unknown or already discarded."""
    pass


class InvalidTransitionError(BookingError):
    """Raised when an operation is not allowed from the current wizard step."""
    pass


class CatalogItemNotFoundError(BookingError):
    """Raised when an event type, cake or add-on is not in the bundled catalog."""
    pass


class DraftInvalidError(BookingError):
    """Raised when the aggregated draft fails final validation."""

    def __init__(self, failures: list[str]) -> None:
        self.failures = list(failures)
        super().__init__(", ".join(self.failures))


class RateLimitedError(BookingError):
    """Raised when a client-side throttle rejects an attempt."""

    def __init__(self, message: str, remaining_seconds: int) -> None:
        self.remaining_seconds = remaining_seconds
        super().__init__(message)


class BackendError(BookingError):
    """Raised when the hosted backend fails (timeouts, network errors, bad responses)."""
    pass


class PaymentGatewayError(BookingError):
    """Raised when the payment provider fails to open a checkout."""
    pass


class PostPaymentBookingError(BookingError):
    """Raised when a charge succeeded but the booking could not be recorded."""
    pass
