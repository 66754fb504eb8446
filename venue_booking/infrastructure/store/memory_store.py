from __future__ import annotations

import uuid

from venue_booking.application.exceptions import SessionNotFoundError
from venue_booking.application.ports.session_store import WizardSessionStorePort
from venue_booking.domain.entities.venue import Venue
from venue_booking.domain.entities.wizard_state import WizardState


class MemoryWizardSessionStore(WizardSessionStorePort):
    """Wizard sessions live only in this process and vanish on restart."""

    def __init__(self) -> None:
        self._states: dict[str, WizardState] = {}
        self._venues: dict[str, Venue] = {}

    def create(self, venue: Venue, state: WizardState) -> str:
        session_id = str(uuid.uuid4())
        self._venues[session_id] = venue
        self._states[session_id] = state
        return session_id

    def get_state(self, session_id: str) -> WizardState:
        try:
            return self._states[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Unknown booking session: {session_id}") from None

    def set_state(self, session_id: str, state: WizardState) -> None:
        if session_id not in self._states:
            raise SessionNotFoundError(f"Unknown booking session: {session_id}")
        self._states[session_id] = state

    def get_venue(self, session_id: str) -> Venue:
        try:
            return self._venues[session_id]
        except KeyError:
            raise SessionNotFoundError(f"Unknown booking session: {session_id}") from None

    def discard(self, session_id: str) -> None:
        self._states.pop(session_id, None)
        self._venues.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._states)
