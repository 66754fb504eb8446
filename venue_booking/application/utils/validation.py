from __future__ import annotations

import re
from datetime import date

from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.slot import Slot
from venue_booking.domain.entities.venue import Venue

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^[0-9]{10}$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_SLOT_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_SCRIPT_SCHEME_RE = re.compile(r"javascript\s*:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"\bon\w+\s*=", re.IGNORECASE)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

BOOKING_NAME_MIN = 2
BOOKING_NAME_MAX = 50


def validate_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(_EMAIL_RE.match(value.strip()))


def validate_phone(value: str | None) -> bool:
    """Exactly ten digits, nothing else."""
    if not value:
        return False
    return bool(_PHONE_RE.fullmatch(value))


def validate_booking_name(value: str | None) -> bool:
    if value is None:
        return False
    return BOOKING_NAME_MIN <= len(value.strip()) <= BOOKING_NAME_MAX


def validate_persons(value: int | str | None, capacity: int) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        value = value.strip()
        if not (value.isascii() and value.isdigit()):
            return False
        value = int(value)
    return 1 <= value <= capacity


def validate_date(value: str | None, today: date | None = None) -> bool:
    """ISO date that exists on the calendar and is not in the past."""
    if not value or not _DATE_RE.match(value):
        return False
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return False
    return parsed >= (today or date.today())


def validate_slot_id(value: str | None) -> bool:
    if not value:
        return False
    return bool(_SLOT_ID_RE.match(value))


def sanitize_input(value: str | None) -> str:
    """Strip markup and script fragments, keep readable text."""
    if not value:
        return ""
    cleaned = value.replace("<", "").replace(">", "")
    cleaned = _SCRIPT_SCHEME_RE.sub("", cleaned)
    cleaned = _EVENT_HANDLER_RE.sub("", cleaned)
    cleaned = _CONTROL_RE.sub("", cleaned)
    return cleaned.strip()


def normalize_phone(value: str | None) -> str:
    if not value:
        return ""
    return re.sub(r"\D", "", value)


def collect_booking_errors(
    draft: BookingDraft,
    venue: Venue,
    slots: tuple[Slot, ...] | list[Slot],
    today: date | None = None,
) -> dict[str, str]:
    """Field-keyed errors for the booking step. Empty dict means the step is valid."""
    errors: dict[str, str] = {}

    if not draft.selected_date:
        errors["selected_date"] = "Please select a booking date"
    elif not validate_date(draft.selected_date, today):
        errors["selected_date"] = "Please select a valid future date"

    if not draft.slot_id:
        errors["slot_id"] = "Please select a time slot"
    elif not validate_slot_id(draft.slot_id) or draft.slot_id not in {s.slot_id for s in slots}:
        errors["slot_id"] = "Please select a valid time slot"

    if not draft.booking_name.strip():
        errors["booking_name"] = "Please enter a booking name"
    elif not validate_booking_name(draft.booking_name):
        errors["booking_name"] = (
            f"Booking name must be between {BOOKING_NAME_MIN}-{BOOKING_NAME_MAX} characters"
        )

    if not draft.persons:
        errors["persons"] = "Please select number of persons"
    elif not validate_persons(draft.persons, venue.capacity):
        errors["persons"] = f"Number of persons must be between 1 and {venue.capacity}"

    if not draft.phone:
        errors["phone"] = "Please enter a WhatsApp number"
    elif not validate_phone(draft.phone):
        errors["phone"] = "Please enter a valid 10-digit WhatsApp number"

    if not draft.email.strip():
        errors["email"] = "Please enter an email address"
    elif not validate_email(draft.email):
        errors["email"] = "Please enter a valid email address"

    return errors
