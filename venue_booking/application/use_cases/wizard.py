from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from venue_booking.application.exceptions import (
    BackendError,
    CatalogItemNotFoundError,
    InvalidTransitionError,
    RateLimitedError,
    VenueNotFoundError,
)
from venue_booking.application.ports.backend import BackendPort
from venue_booking.application.ports.catalog import CatalogPort
from venue_booking.application.ports.rate_limiter import RateLimiterPort
from venue_booking.application.ports.session_store import WizardSessionStorePort
from venue_booking.application.use_cases.pricing import DEFAULT_ADVANCE_AMOUNT, compute_price
from venue_booking.application.utils.validation import (
    collect_booking_errors,
    normalize_phone,
    sanitize_input,
    validate_date,
)
from venue_booking.domain.entities.booking_draft import BookingDraft, CakeSelection
from venue_booking.domain.entities.pricing import PriceBreakdown
from venue_booking.domain.entities.venue import Venue
from venue_booking.domain.entities.wizard_state import (
    WizardState,
    WizardStep,
    next_step,
    previous_step,
)

AVAILABILITY_ERROR_MESSAGE = "Could not load available slots. Please try again."
CAKE_TYPES = ("egg", "eggless")
CAKE_WEIGHTS = ("halfKg", "oneKg")


@dataclass(frozen=True)
class WizardView:
    session_id: str
    venue: Venue
    state: WizardState
    price: PriceBreakdown


@dataclass(frozen=True)
class CakeRequest:
    name: str
    type: str
    weight: str
    quantity: int = 1


class BookingWizardUseCase:
    """Linear booking wizard: booking -> event-type -> cake -> addons -> summary."""

    def __init__(
        self,
        backend: BackendPort,
        catalog: CatalogPort,
        store: WizardSessionStorePort,
        form_rate_limiter: RateLimiterPort,
        timezone: ZoneInfo,
        advance_amount: int = DEFAULT_ADVANCE_AMOUNT,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._backend = backend
        self._catalog = catalog
        self._store = store
        self._form_rate_limiter = form_rate_limiter
        self._timezone = timezone
        self._advance_amount = advance_amount
        self._today_provider = today
        self._logger = logging.getLogger(__name__)

    async def start(self, venue_id: str | None) -> WizardView:
        if not venue_id or not venue_id.strip():
            raise VenueNotFoundError("No venue selected")

        venue = await self._backend.get_venue(venue_id.strip())
        if venue is None:
            self._logger.info("Venue not found", extra={"venue_id": venue_id})
            raise VenueNotFoundError("Venue not found")

        state = WizardState(
            venue_id=venue.id,
            draft=BookingDraft(decoration=venue.is_couple_venue),
        )
        session_id = self._store.create(venue, state)
        self._logger.info(
            "Wizard session started",
            extra={"session_id": session_id, "venue_id": venue.id},
        )
        return self._view(session_id, venue, state)

    def view(self, session_id: str) -> WizardView:
        return self._view(session_id, self._store.get_venue(session_id), self._store.get_state(session_id))

    def update_details(
        self,
        session_id: str,
        *,
        booking_name: str | None = None,
        persons: int | str | None = None,
        phone: str | None = None,
        email: str | None = None,
        decoration: bool | None = None,
        slot_id: str | None = None,
    ) -> WizardView:
        """Merge edits to booking-step fields, clearing the error of each edited field."""
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        self._require_step(state, WizardStep.booking)

        changes: dict[str, object] = {}
        if booking_name is not None:
            changes["booking_name"] = sanitize_input(booking_name)
        if persons is not None:
            changes["persons"] = sanitize_input(str(persons))
        if phone is not None:
            changes["phone"] = normalize_phone(phone)
        if email is not None:
            changes["email"] = sanitize_input(email)
        if decoration is not None and not venue.is_couple_venue:
            changes["decoration"] = bool(decoration)
        if slot_id is not None:
            changes["slot_id"] = sanitize_input(slot_id) or None

        errors = {k: v for k, v in state.errors.items() if k not in changes}
        updated = replace(state, draft=replace(state.draft, **changes), errors=errors)
        return self._save(session_id, venue, updated)

    async def select_date(self, session_id: str, selected_date: str) -> WizardView:
        """
        Change the booking date and refresh availability.
        Each call takes a new token; a fetch whose token is no longer current
        when it completes is dropped, so the latest date always wins.
        """
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        self._require_step(state, WizardStep.booking)

        selected_date = sanitize_input(selected_date)
        token = state.availability_token + 1
        errors = {k: v for k, v in state.errors.items() if k not in ("selected_date", "slot_id")}
        draft = replace(state.draft, selected_date=selected_date or None)

        if not validate_date(selected_date, self._today()):
            errors["selected_date"] = "Please select a valid future date"
            updated = replace(
                state,
                draft=replace(draft, slot_id=None),
                slots=(),
                slots_loading=False,
                errors=errors,
                availability_token=token,
            )
            return self._save(session_id, venue, updated)

        self._save(
            session_id,
            venue,
            replace(state, draft=draft, slots_loading=True, errors=errors, availability_token=token),
        )

        message = None
        try:
            slots = await self._backend.get_available_slots(venue.id, selected_date)
        except BackendError as e:
            self._logger.error(
                "Error fetching available slots",
                extra={"session_id": session_id, "venue_id": venue.id, "reason": str(e)},
            )
            slots = []
            message = AVAILABILITY_ERROR_MESSAGE

        current = self._store.get_state(session_id)
        if current.availability_token != token:
            self._logger.info(
                "Discarding stale availability result",
                extra={"session_id": session_id, "reason": f"date={selected_date}"},
            )
            return self._view(session_id, venue, current)

        slot_id = current.draft.slot_id
        if not slots:
            slot_id = None
        elif slot_id not in {slot.slot_id for slot in slots}:
            slot_id = slots[0].slot_id

        updated = replace(
            current,
            draft=replace(current.draft, slot_id=slot_id),
            slots=tuple(slots),
            slots_loading=False,
            message=message,
        )
        return self._save(session_id, venue, updated)

    def next(self, session_id: str) -> WizardView:
        """Forward transition. Validation failures stay on the current step with errors filled in."""
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)

        if state.step == WizardStep.booking:
            key = f"{session_id}_form"
            if not self._form_rate_limiter.is_allowed(key):
                remaining = math.ceil(self._form_rate_limiter.get_remaining_time(key) / 1000)
                message = f"Too many requests. Please wait {remaining} seconds before trying again."
                self._save(session_id, venue, replace(state, message=message))
                raise RateLimitedError(message, remaining)
            errors = collect_booking_errors(state.draft, venue, state.slots, self._today())
        elif state.step == WizardStep.event_type:
            errors = {} if state.draft.event_type else {"event_type": "Please select an event type"}
        elif state.step == WizardStep.summary:
            raise InvalidTransitionError("Confirm the booking to continue from the summary step")
        else:
            errors = {}

        if errors:
            self._logger.info(
                "Wizard step blocked",
                extra={"session_id": session_id, "step": state.step.value, "reason": ",".join(errors)},
            )
            return self._save(session_id, venue, replace(state, errors=errors))

        target = next_step(state.step)
        return self._save(session_id, venue, replace(state, step=target, errors={}, message=None))

    def back(self, session_id: str) -> WizardView:
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        return self._save(session_id, venue, replace(state, step=previous_step(state.step), message=None))

    def choose_event_type(self, session_id: str, name: str) -> WizardView:
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        self._require_step(state, WizardStep.event_type)

        event_type = self._catalog.get_event_type(name)
        if not event_type:
            raise CatalogItemNotFoundError(f"Unknown event type: {name}")

        errors = {k: v for k, v in state.errors.items() if k != "event_type"}
        updated = replace(state, draft=replace(state.draft, event_type=event_type.name), errors=errors)
        return self._save(session_id, venue, updated)

    def set_cakes(self, session_id: str, cakes: list[CakeRequest]) -> WizardView:
        """Replace the cake selection. Unit prices always come from the catalog."""
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        self._require_step(state, WizardStep.cake)

        selections: list[CakeSelection] = []
        for cake in cakes:
            if cake.type not in CAKE_TYPES:
                raise ValueError(f"Cake type must be one of {', '.join(CAKE_TYPES)}")
            if cake.weight not in CAKE_WEIGHTS:
                raise ValueError(f"Cake weight must be one of {', '.join(CAKE_WEIGHTS)}")
            if cake.quantity < 1:
                raise ValueError("Cake quantity must be at least 1")
            price = self._catalog.cake_price(cake.name, cake.type, cake.weight)
            if price is None:
                raise CatalogItemNotFoundError(f"Unknown cake: {cake.name}")
            selections.append(
                CakeSelection(
                    name=cake.name.strip(),
                    type=cake.type,
                    weight=cake.weight,
                    price=price,
                    quantity=cake.quantity,
                )
            )

        updated = replace(state, draft=replace(state.draft, cakes=tuple(selections)))
        return self._save(session_id, venue, updated)

    def toggle_add_on(self, session_id: str, name: str) -> WizardView:
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        self._require_editable(state)
        self._require_step(state, WizardStep.addons)

        add_on = self._catalog.get_add_on(name)
        if not add_on:
            raise CatalogItemNotFoundError(f"Unknown add-on: {name}")

        selected = state.draft.add_ons
        if add_on.name in selected:
            selected = tuple(n for n in selected if n != add_on.name)
        else:
            selected = selected + (add_on.name,)
        return self._save(session_id, venue, replace(state, draft=replace(state.draft, add_ons=selected)))

    def _save(self, session_id: str, venue: Venue, state: WizardState) -> WizardView:
        if venue.is_couple_venue and not state.draft.decoration:
            state = replace(state, draft=replace(state.draft, decoration=True))
        self._store.set_state(session_id, state)
        return self._view(session_id, venue, state)

    def _view(self, session_id: str, venue: Venue, state: WizardState) -> WizardView:
        return WizardView(
            session_id=session_id,
            venue=venue,
            state=state,
            price=compute_price(venue, state.draft, self._catalog, self._advance_amount),
        )

    def _require_editable(self, state: WizardState) -> None:
        if state.captured_payment_id:
            raise InvalidTransitionError("Payment was already received for this booking. Please contact support.")
        if state.busy:
            raise InvalidTransitionError("A payment is in progress for this booking")

    def _require_step(self, state: WizardState, step: WizardStep) -> None:
        if state.step != step:
            raise InvalidTransitionError(
                f"This change belongs to the {step.value} step, current step is {state.step.value}"
            )

    def _today(self) -> date:
        if self._today_provider:
            return self._today_provider()
        return datetime.now(self._timezone).date()
