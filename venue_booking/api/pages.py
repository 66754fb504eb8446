from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from venue_booking.application.exceptions import BackendError
from venue_booking.application.ports.backend import BackendPort
from venue_booking.application.ports.catalog import CatalogPort
from venue_booking.api.schemas import AddOnSchema, CakeSchema, EventTypeSchema, VenueSchema
from venue_booking.core.config import settings
from venue_booking.wiring.dependencies import get_backend, get_catalog


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def landing(
    backend: BackendPort = Depends(get_backend),
    catalog: CatalogPort = Depends(get_catalog),
) -> dict:
    message = None
    try:
        venues = await backend.list_venues()
    except BackendError as e:
        logger.error("Error loading venues", extra={"reason": str(e)})
        venues = []
        message = "Could not load venues. Please refresh the page."

    return {
        "business": settings.BUSINESS_NAME,
        "venues": [VenueSchema.from_venue(v).model_dump() for v in venues],
        "event_types": [EventTypeSchema.from_event_type(e).model_dump() for e in catalog.list_event_types()],
        "cakes": [CakeSchema.from_cake(c).model_dump() for c in catalog.list_cakes()],
        "message": message,
    }


@router.get("/add-ons")
def add_ons(catalog: CatalogPort = Depends(get_catalog)) -> dict:
    return {"add_ons": [AddOnSchema.from_add_on(a).model_dump() for a in catalog.list_add_ons()]}


@router.get("/booking-success")
def booking_success() -> dict:
    return {
        "page": "booking-success",
        "title": "Booking Confirmed",
        "message": f"Thank you for choosing {settings.BUSINESS_NAME}",
        "contact": {"phone": settings.SUPPORT_PHONE, "email": settings.SUPPORT_EMAIL},
    }
