"""
Tests for input validators and the booking-step error map.
"""

from __future__ import annotations

from datetime import date

import pytest

from venue_booking.application.utils.validation import (
    collect_booking_errors,
    normalize_phone,
    sanitize_input,
    validate_booking_name,
    validate_date,
    validate_email,
    validate_persons,
    validate_phone,
    validate_slot_id,
)
from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.slot import Slot
from venue_booking.domain.entities.venue import Venue

SLOT_ID = "3f2b8c1e-9a4d-4e6f-8b2a-1c3d5e7f9a0b"


@pytest.mark.parametrize("capacity", [1, 2, 8, 20])
def test_persons_accepted_only_within_capacity(capacity):
    for persons in range(-1, capacity + 3):
        assert validate_persons(persons, capacity) is (1 <= persons <= capacity)


def test_persons_accepts_numeric_strings_only():
    assert validate_persons("3", 8)
    assert validate_persons(" 3 ", 8)
    assert not validate_persons("three", 8)
    assert not validate_persons("2.5", 8)
    assert not validate_persons("²", 8)
    assert not validate_persons("３", 8)
    assert not validate_persons("", 8)
    assert not validate_persons(None, 8)
    assert not validate_persons(True, 8)


@pytest.mark.parametrize("phone", ["9876543210", "0000000000", "1234567890"])
def test_ten_digit_phone_accepted(phone):
    assert validate_phone(phone)


@pytest.mark.parametrize(
    "phone",
    ["987654321", "98765432101", "98765-43210", "987654321a", "+919876543", "", " 9876543210", None],
)
def test_bad_phone_rejected(phone):
    assert not validate_phone(phone)


def test_normalize_phone_keeps_digits():
    assert normalize_phone("+91 (987) 654-3210") == "919876543210"
    assert normalize_phone(None) == ""


@pytest.mark.parametrize("email", ["test@example.com", "a.b+c@mail.co.in"])
def test_valid_email(email):
    assert validate_email(email)


@pytest.mark.parametrize("email", ["", "plain", "no@tld", "two@@example.com", "sp ace@example.com", None])
def test_invalid_email(email):
    assert not validate_email(email)


def test_booking_name_length_is_trimmed():
    assert validate_booking_name("Jo")
    assert validate_booking_name("  Jo  ")
    assert not validate_booking_name(" J ")
    assert validate_booking_name("x" * 50)
    assert not validate_booking_name("x" * 51)


def test_date_must_be_today_or_later():
    today = date(2026, 10, 19)
    assert validate_date("2026-10-19", today)
    assert validate_date("2027-01-01", today)
    assert not validate_date("2026-10-18", today)
    assert not validate_date("2026-02-30", today)
    assert not validate_date("19-10-2026", today)
    assert not validate_date("", today)


def test_slot_id_must_look_like_uuid():
    assert validate_slot_id(SLOT_ID)
    assert validate_slot_id(SLOT_ID.upper())
    assert not validate_slot_id("")
    assert not validate_slot_id("slot-1")
    assert not validate_slot_id(None)


def test_sanitize_strips_markup_but_keeps_text():
    assert sanitize_input("  <script>alert(1)</script> ") == "scriptalert(1)/script"
    assert sanitize_input("javascript:alert(1)") == "alert(1)"
    assert sanitize_input('x onclick="y"') == 'x "y"'
    assert sanitize_input("Sash & Crown") == "Sash & Crown"
    assert sanitize_input("Table Décor") == "Table Décor"
    assert sanitize_input(None) == ""


def test_booking_errors_are_field_keyed():
    venue = Venue(id="aura", name="Aura", price=1699, capacity=8)
    draft = BookingDraft(booking_name="J", persons="9", phone="123", email="bad")
    errors = collect_booking_errors(draft, venue, (), date(2026, 10, 19))

    assert errors == {
        "selected_date": "Please select a booking date",
        "slot_id": "Please select a time slot",
        "booking_name": "Booking name must be between 2-50 characters",
        "persons": "Number of persons must be between 1 and 8",
        "phone": "Please enter a valid 10-digit WhatsApp number",
        "email": "Please enter a valid email address",
    }


def test_slot_must_come_from_latest_fetch():
    venue = Venue(id="aura", name="Aura", price=1699, capacity=8)
    draft = BookingDraft(
        booking_name="John",
        persons="2",
        phone="9876543210",
        email="john@example.com",
        selected_date="2026-10-25",
        slot_id=SLOT_ID,
    )
    today = date(2026, 10, 19)

    assert collect_booking_errors(draft, venue, (), today) == {"slot_id": "Please select a valid time slot"}
    slots = (Slot(slot_id=SLOT_ID, start_time="18:00:00", end_time="21:00:00"),)
    assert collect_booking_errors(draft, venue, slots, today) == {}
