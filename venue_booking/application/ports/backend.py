from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from venue_booking.domain.entities.slot import Slot
from venue_booking.domain.entities.venue import Venue


class BackendPort(ABC):
    @abstractmethod
    async def list_venues(self) -> list[Venue]:
        """List every bookable venue."""
        raise NotImplementedError

    @abstractmethod
    async def get_venue(self, venue_id: str) -> Venue | None:
        """Get a venue by id. Returns None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def get_available_slots(self, venue_id: str, booking_date: str) -> list[Slot]:
        """Currently bookable slots for a venue on a date, in display order."""
        raise NotImplementedError

    @abstractmethod
    async def create_secure_booking(self, payload: dict[str, Any], idempotency_key: str) -> dict[str, Any]:
        """Invoke the remote secure-booking function. Returns its success payload."""
        raise NotImplementedError
