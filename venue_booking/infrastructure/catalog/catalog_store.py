from __future__ import annotations

from venue_booking.application.ports.catalog import CatalogPort
from venue_booking.domain.entities.catalog import AddOn, Cake, CakeType, CakeWeight, EventType
from venue_booking.infrastructure.catalog.catalog_data import ADD_ONS, CAKES, EVENT_TYPES


class CatalogStore(CatalogPort):
    def __init__(
        self,
        add_ons: tuple[AddOn, ...] | None = None,
        event_types: tuple[EventType, ...] | None = None,
        cakes: tuple[Cake, ...] | None = None,
    ) -> None:
        self._add_ons = {a.name: a for a in (add_ons or ADD_ONS)}
        self._event_types = {e.name: e for e in (event_types or EVENT_TYPES)}
        self._cakes = {c.name: c for c in (cakes or CAKES)}

    def list_add_ons(self) -> list[AddOn]:
        return list(self._add_ons.values())

    def list_event_types(self) -> list[EventType]:
        return list(self._event_types.values())

    def list_cakes(self) -> list[Cake]:
        return list(self._cakes.values())

    def get_add_on(self, name: str) -> AddOn | None:
        return self._add_ons.get(name.strip())

    def get_event_type(self, name: str) -> EventType | None:
        return self._event_types.get(name.strip())

    def get_cake(self, name: str) -> Cake | None:
        return self._cakes.get(name.strip())

    def cake_price(self, name: str, cake_type: CakeType, weight: CakeWeight) -> int | None:
        cake = self.get_cake(name)
        if not cake:
            return None
        return cake.prices.price_for(cake_type, weight)
