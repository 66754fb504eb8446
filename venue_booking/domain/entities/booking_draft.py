from __future__ import annotations

from dataclasses import dataclass

from venue_booking.domain.entities.catalog import CakeType, CakeWeight


@dataclass(frozen=True)
class CakeSelection:
    name: str
    type: CakeType
    weight: CakeWeight
    price: int  # unit price resolved from the catalog
    quantity: int = 1

    @property
    def summary(self) -> str:
        return f"{self.name} ({self.type}, {self.weight}) x{self.quantity}"


@dataclass(frozen=True)
class BookingDraft:
    booking_name: str = ""
    persons: str = "1"  # raw form value, validated against venue capacity
    phone: str = ""  # WhatsApp number
    email: str = ""
    decoration: bool = False
    selected_date: str | None = None  # YYYY-MM-DD
    slot_id: str | None = None
    event_type: str | None = None
    cakes: tuple[CakeSelection, ...] = ()
    add_ons: tuple[str, ...] = ()
