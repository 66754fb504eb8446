from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.slot import Slot


class WizardStep(str, Enum):
    booking = "booking"
    event_type = "event-type"
    cake = "cake"
    addons = "addons"
    summary = "summary"


STEP_ORDER: tuple[WizardStep, ...] = (
    WizardStep.booking,
    WizardStep.event_type,
    WizardStep.cake,
    WizardStep.addons,
    WizardStep.summary,
)


def next_step(step: WizardStep) -> WizardStep | None:
    index = STEP_ORDER.index(step)
    return STEP_ORDER[index + 1] if index + 1 < len(STEP_ORDER) else None


def previous_step(step: WizardStep) -> WizardStep:
    index = STEP_ORDER.index(step)
    return STEP_ORDER[max(index - 1, 0)]


@dataclass(frozen=True)
class WizardState:
    venue_id: str
    step: WizardStep = WizardStep.booking
    draft: BookingDraft = BookingDraft()
    slots: tuple[Slot, ...] = ()
    slots_loading: bool = False
    errors: dict[str, str] = field(default_factory=dict)  # field-keyed validation errors
    message: str | None = None  # banner shown above the current step
    busy: bool = False  # a payment attempt is in flight
    availability_token: int = 0  # bumped on every date change; latest fetch wins
    pending_order_id: str | None = None
    captured_payment_id: str | None = None  # paid, but the booking call has not succeeded yet

    @property
    def selected_slot(self) -> Slot | None:
        for slot in self.slots:
            if slot.slot_id == self.draft.slot_id:
                return slot
        return None
