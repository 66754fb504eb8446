from __future__ import annotations

import logging
import uuid
from typing import Any

from venue_booking.application.ports.backend import BackendPort
from venue_booking.domain.entities.slot import Slot
from venue_booking.domain.entities.venue import Venue

_SLOT_TIMES = (("10:00:00", "13:00:00"), ("14:00:00", "17:00:00"), ("18:00:00", "21:00:00"))
_REFUND_POLICY = "Advance is refundable if cancelled 72 hours before the slot."

DEFAULT_VENUES: tuple[Venue, ...] = (
    Venue(
        id="aura",
        name="Aura",
        price=1699,
        capacity=8,
        screen_size="150 inch screen",
        features=("Up to 8 people", "Dolby Atmos sound", "Recliner seating"),
        refund_policy=_REFUND_POLICY,
    ),
    Venue(
        id="couple",
        name="Couple",
        price=1499,
        capacity=2,
        screen_size="120 inch screen",
        features=("2 people", "Decoration included", "Private lounge"),
        refund_policy=_REFUND_POLICY,
        is_couple_venue=True,
    ),
    Venue(
        id="lunar",
        name="Lunar",
        price=1999,
        capacity=12,
        screen_size="180 inch screen",
        features=("Up to 12 people", "Dolby Atmos sound", "Party lighting"),
        refund_policy=_REFUND_POLICY,
    ),
    Venue(
        id="minimax",
        name="Minimax",
        price=2499,
        capacity=20,
        screen_size="200 inch screen",
        features=("Up to 20 people", "4K projector", "Sofa seating"),
        refund_policy=_REFUND_POLICY,
    ),
)


class MockBackend(BackendPort):
    """In-memory stand-in for the hosted backend, used in dev and tests."""

    def __init__(self, venues: tuple[Venue, ...] | None = None) -> None:
        self._venues = {v.id: v for v in (venues or DEFAULT_VENUES)}
        self._booked: set[tuple[str, str, str]] = set()
        self._bookings: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    async def list_venues(self) -> list[Venue]:
        return list(self._venues.values())

    async def get_venue(self, venue_id: str) -> Venue | None:
        return self._venues.get(venue_id)

    async def get_available_slots(self, venue_id: str, booking_date: str) -> list[Slot]:
        if venue_id not in self._venues:
            return []
        slots: list[Slot] = []
        for start, end in _SLOT_TIMES:
            slot_id = self._slot_id(venue_id, booking_date, start)
            if (venue_id, booking_date, slot_id) not in self._booked:
                slots.append(Slot(slot_id=slot_id, start_time=start, end_time=end))
        return slots

    async def create_secure_booking(self, payload: dict[str, Any], idempotency_key: str) -> dict[str, Any]:
        if idempotency_key in self._bookings:
            return self._bookings[idempotency_key]

        booking_id = str(uuid.uuid4())
        self._booked.add((str(payload["venue_id"]), str(payload["booking_date"]), str(payload["slot_id"])))
        result = {"success": True, "booking_id": booking_id}
        self._bookings[idempotency_key] = result
        self._logger.info(
            "Mock booking created",
            extra={"venue_id": payload.get("venue_id"), "payment_id": payload.get("payment_id")},
        )
        return result

    @property
    def bookings(self) -> dict[str, dict[str, Any]]:
        return dict(self._bookings)

    @staticmethod
    def _slot_id(venue_id: str, booking_date: str, start: str) -> str:
        return str(uuid.uuid5(uuid.NAMESPACE_URL, f"{venue_id}/{booking_date}/{start}"))
