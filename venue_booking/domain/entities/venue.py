from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Venue:
    id: str
    name: str
    price: int
    capacity: int  # "base_members" in the venues table
    image: str | None = None
    screen_size: str | None = None
    decoration_fee: int = 400
    features: tuple[str, ...] = field(default_factory=tuple)
    refund_policy: str | None = None
    is_couple_venue: bool = False  # decoration is mandatory for this venue
