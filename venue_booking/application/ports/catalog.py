from __future__ import annotations

from abc import ABC, abstractmethod

from venue_booking.domain.entities.catalog import AddOn, Cake, CakeType, CakeWeight, EventType


class CatalogPort(ABC):
    @abstractmethod
    def list_add_ons(self) -> list[AddOn]:
        raise NotImplementedError

    @abstractmethod
    def list_event_types(self) -> list[EventType]:
        raise NotImplementedError

    @abstractmethod
    def list_cakes(self) -> list[Cake]:
        raise NotImplementedError

    @abstractmethod
    def get_add_on(self, name: str) -> AddOn | None:
        """Get add-on by display name."""
        raise NotImplementedError

    @abstractmethod
    def get_event_type(self, name: str) -> EventType | None:
        """Get event type by display name."""
        raise NotImplementedError

    @abstractmethod
    def get_cake(self, name: str) -> Cake | None:
        """Get cake by display name."""
        raise NotImplementedError

    @abstractmethod
    def cake_price(self, name: str, cake_type: CakeType, weight: CakeWeight) -> int | None:
        """Unit price for a cake variant. Returns None if the cake is unknown."""
        raise NotImplementedError
