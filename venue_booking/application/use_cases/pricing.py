from __future__ import annotations

from venue_booking.application.ports.catalog import CatalogPort
from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.pricing import PriceBreakdown
from venue_booking.domain.entities.venue import Venue

DEFAULT_ADVANCE_AMOUNT = 700  # includes the 50 convenience fee


def compute_price(
    venue: Venue,
    draft: BookingDraft,
    catalog: CatalogPort,
    advance_amount: int = DEFAULT_ADVANCE_AMOUNT,
) -> PriceBreakdown:
    """Deterministic price for the current selections, in whole rupees."""
    decoration_fee = venue.decoration_fee if draft.decoration else 0
    cakes_total = sum(cake.price * cake.quantity for cake in draft.cakes)

    add_ons_total = 0
    for name in draft.add_ons:
        add_on = catalog.get_add_on(name)
        add_ons_total += add_on.price if add_on else 0

    subtotal = venue.price + decoration_fee + cakes_total + add_ons_total
    return PriceBreakdown(
        base_price=venue.price,
        decoration_fee=decoration_fee,
        cakes_total=cakes_total,
        add_ons_total=add_ons_total,
        subtotal=subtotal,
        advance_amount=advance_amount,
        balance_amount=subtotal - advance_amount,
    )
