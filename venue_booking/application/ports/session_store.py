from abc import ABC, abstractmethod

from venue_booking.domain.entities.venue import Venue
from venue_booking.domain.entities.wizard_state import WizardState


class WizardSessionStorePort(ABC):
    @abstractmethod
    def create(self, venue: Venue, state: WizardState) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_state(self, session_id: str) -> WizardState:
        raise NotImplementedError

    @abstractmethod
    def set_state(self, session_id: str, state: WizardState) -> None:
        raise NotImplementedError

    @abstractmethod
    def get_venue(self, session_id: str) -> Venue:
        raise NotImplementedError

    @abstractmethod
    def discard(self, session_id: str) -> None:
        raise NotImplementedError
