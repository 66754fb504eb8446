from __future__ import annotations

from fastapi import HTTPException

from venue_booking.application.exceptions import (
    BackendError,
    BookingError,
    CatalogItemNotFoundError,
    DraftInvalidError,
    InvalidTransitionError,
    PaymentGatewayError,
    PostPaymentBookingError,
    RateLimitedError,
    SessionNotFoundError,
    VenueNotFoundError,
)
from venue_booking.core.config import settings


def to_http_exception(error: BookingError) -> HTTPException:
    if isinstance(error, RateLimitedError):
        return HTTPException(
            status_code=429,
            detail=str(error),
            headers={"Retry-After": str(error.remaining_seconds)},
        )
    if isinstance(error, PostPaymentBookingError):
        return HTTPException(
            status_code=502,
            detail={
                "message": str(error),
                "severity": "critical",
                "support_phone": settings.SUPPORT_PHONE,
                "support_email": settings.SUPPORT_EMAIL,
            },
        )
    if isinstance(error, DraftInvalidError):
        return HTTPException(status_code=422, detail={"message": str(error), "failures": error.failures})
    if isinstance(error, (SessionNotFoundError, VenueNotFoundError)):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, CatalogItemNotFoundError):
        return HTTPException(status_code=422, detail=str(error))
    if isinstance(error, InvalidTransitionError):
        return HTTPException(status_code=409, detail=str(error))
    if isinstance(error, (BackendError, PaymentGatewayError)):
        return HTTPException(status_code=502, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))
