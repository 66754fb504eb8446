"""
Tests for final confirmation and the payment completion channel.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest

from venue_booking.application.exceptions import (
    BackendError,
    DraftInvalidError,
    InvalidTransitionError,
    PaymentGatewayError,
    PostPaymentBookingError,
    RateLimitedError,
    SessionNotFoundError,
)
from venue_booking.application.use_cases.payment import (
    CANCELLED_MESSAGE,
    CHECKOUT_FAILED_MESSAGE,
    POST_PAYMENT_FAILURE_MESSAGE,
    SUCCESS_PAGE,
)
from venue_booking.application.use_cases.wizard import CakeRequest
from venue_booking.application.utils.rate_limiter import RateLimiter
from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.payment import PaymentOutcome, PaymentStatus
from venue_booking.domain.entities.wizard_state import WizardStep
from venue_booking.infrastructure.backend.mock_backend import MockBackend
from venue_booking.infrastructure.payments.mock_gateway import MockPaymentGateway

from tests.conftest import BOOKING_DATE, FakeClock, make_orchestrator, make_wizard, reach_summary


class FlakyBookingBackend(MockBackend):
    """Fails the first N secure-booking calls, recording every idempotency key."""

    def __init__(self, failures: int) -> None:
        super().__init__()
        self.failures = failures
        self.keys: list[str] = []
        self.payloads: list[dict] = []

    async def create_secure_booking(self, payload, idempotency_key):
        self.keys.append(idempotency_key)
        self.payloads.append(payload)
        if self.failures > 0:
            self.failures -= 1
            raise BackendError("edge function timed out")
        return await super().create_secure_booking(payload, idempotency_key)


class RecordingGateway(MockPaymentGateway):
    def __init__(self) -> None:
        super().__init__()
        self.requests = []

    async def create_checkout(self, request):
        self.requests.append(request)
        return await super().create_checkout(request)


class BrokenGateway(MockPaymentGateway):
    async def create_checkout(self, request):
        raise PaymentGatewayError("orders API down")


def _confirmed(checkout, payment_id="pay_123"):
    return PaymentOutcome(status=PaymentStatus.confirmed, payment_id=payment_id, order_id=checkout.order_id)


def test_confirm_builds_payment_request(wizard, orchestrator, store):
    sid = asyncio.run(reach_summary(wizard))
    checkout = asyncio.run(orchestrator.confirm(sid))

    request = checkout.request
    assert request.amount == 70000
    assert request.currency == "INR"
    assert request.description == "Booking for Aura"
    assert request.prefill == {"name": "John Doe", "email": "john@example.com", "contact": "9876543210"}
    assert request.notes["booking_date"] == BOOKING_DATE
    assert len(request.receipt) <= 40

    state = store.get_state(sid)
    assert state.busy is True
    assert state.pending_order_id == checkout.order_id


def test_confirm_only_from_summary(wizard, orchestrator):
    sid = asyncio.run(reach_summary(wizard))
    wizard.back(sid)
    with pytest.raises(InvalidTransitionError):
        asyncio.run(orchestrator.confirm(sid))


def test_invalid_draft_aborts_before_payment(wizard, backend, store):
    gateway = RecordingGateway()
    orchestrator = make_orchestrator(backend, gateway, store)
    sid = asyncio.run(wizard.start("aura")).session_id
    state = store.get_state(sid)
    store.set_state(sid, replace(state, step=WizardStep.summary, draft=BookingDraft(email="bad")))

    with pytest.raises(DraftInvalidError) as excinfo:
        asyncio.run(orchestrator.confirm(sid))

    assert excinfo.value.failures == [
        "Invalid booking name",
        "Invalid email address",
        "Invalid phone number",
        "Missing date or slot selection",
        "Please select an event type",
    ]
    assert gateway.requests == []
    assert store.get_state(sid).message == str(excinfo.value)


def test_booking_rate_limit_reports_wait(wizard, backend, gateway, store):
    clock = FakeClock(0.0)
    orchestrator = make_orchestrator(
        backend, gateway, store, RateLimiter(max_requests=1, window_ms=300_000, clock=clock)
    )
    sid = asyncio.run(reach_summary(wizard))

    checkout = asyncio.run(orchestrator.confirm(sid))
    asyncio.run(orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.cancelled)))
    clock.advance(60_000)

    with pytest.raises(RateLimitedError) as excinfo:
        asyncio.run(orchestrator.confirm(sid))

    assert excinfo.value.remaining_seconds == 240
    assert "Please wait 240 seconds" in store.get_state(sid).message
    assert checkout.order_id


def test_dismissal_keeps_draft_and_skips_backend(wizard, orchestrator, backend, store):
    sid = asyncio.run(reach_summary(wizard))
    before = store.get_state(sid).draft
    asyncio.run(orchestrator.confirm(sid))

    result = asyncio.run(orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.cancelled)))

    assert result.status == PaymentStatus.cancelled
    assert result.message == CANCELLED_MESSAGE
    state = store.get_state(sid)
    assert state.busy is False
    assert state.message == CANCELLED_MESSAGE
    assert state.draft == before
    assert backend.bookings == {}

    # resubmission works without re-entering anything
    checkout = asyncio.run(orchestrator.confirm(sid))
    assert checkout.request.prefill["email"] == "john@example.com"


def test_failed_payment_reports_reason(wizard, orchestrator, store):
    sid = asyncio.run(reach_summary(wizard))
    asyncio.run(orchestrator.confirm(sid))

    result = asyncio.run(
        orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.failed, reason="card declined"))
    )
    assert result.status == PaymentStatus.failed
    assert result.message == "Payment failed: card declined. Please try again."
    assert store.get_state(sid).busy is False


def test_confirmed_payment_books_and_redirects(catalog, store, gateway):
    backend = FlakyBookingBackend(failures=0)
    wizard = make_wizard(backend, catalog, store)
    orchestrator = make_orchestrator(backend, gateway, store)

    async def scenario():
        sid = await reach_summary(wizard)
        wizard.back(sid)
        wizard.back(sid)
        wizard.set_cakes(sid, [CakeRequest(name="Vanilla", type="egg", weight="halfKg", quantity=2)])
        wizard.next(sid)
        wizard.toggle_add_on(sid, "Sash & Crown")
        wizard.next(sid)
        checkout = await orchestrator.confirm(sid)
        return sid, await orchestrator.complete(sid, _confirmed(checkout))

    sid, result = asyncio.run(scenario())

    assert result.status == PaymentStatus.confirmed
    assert result.redirect_to == SUCCESS_PAGE
    assert result.booking["success"] is True

    payload = backend.payloads[0]
    assert payload["venue_id"] == "aura"
    assert payload["booking_date"] == BOOKING_DATE
    assert payload["persons"] == 2
    assert payload["whatsapp"] == "9876543210"
    assert payload["payment_id"] == "pay_123"
    assert payload["advance_paid"] is True
    assert payload["event_type"] == "Birthday"
    assert payload["cake_selection"] == "Vanilla (egg, halfKg) x2"
    assert payload["selected_addons"] == "Sash & Crown"

    with pytest.raises(SessionNotFoundError):
        store.get_state(sid)


def test_booking_failure_after_payment_is_distinct(catalog, store, gateway):
    backend = FlakyBookingBackend(failures=1)
    wizard = make_wizard(backend, catalog, store)
    orchestrator = make_orchestrator(backend, gateway, store)

    async def scenario():
        sid = await reach_summary(wizard)
        checkout = await orchestrator.confirm(sid)
        with pytest.raises(PostPaymentBookingError) as excinfo:
            await orchestrator.complete(sid, _confirmed(checkout))
        assert str(excinfo.value) == POST_PAYMENT_FAILURE_MESSAGE
        assert store.get_state(sid).message == POST_PAYMENT_FAILURE_MESSAGE

        retried = await orchestrator.complete(sid, _confirmed(checkout))
        return retried

    result = asyncio.run(scenario())

    assert result.redirect_to == SUCCESS_PAGE
    assert len(backend.keys) == 2
    assert backend.keys[0] == backend.keys[1]


def test_unverified_payment_is_not_booked(wizard, orchestrator, backend, store):
    sid = asyncio.run(reach_summary(wizard))
    asyncio.run(orchestrator.confirm(sid))

    outcome = PaymentOutcome(status=PaymentStatus.confirmed, payment_id="pay_1", order_id="order_other")
    with pytest.raises(PostPaymentBookingError):
        asyncio.run(orchestrator.complete(sid, outcome))
    assert backend.bookings == {}


def test_confirmed_outcome_requires_payment_id(wizard, orchestrator):
    sid = asyncio.run(reach_summary(wizard))
    asyncio.run(orchestrator.confirm(sid))
    with pytest.raises(ValueError):
        asyncio.run(orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.confirmed)))


def test_checkout_failure_clears_busy(wizard, backend, store):
    orchestrator = make_orchestrator(backend, BrokenGateway(), store)
    sid = asyncio.run(reach_summary(wizard))

    with pytest.raises(PaymentGatewayError):
        asyncio.run(orchestrator.confirm(sid))

    state = store.get_state(sid)
    assert state.busy is False
    assert state.message == CHECKOUT_FAILED_MESSAGE


def test_complete_without_checkout_is_rejected(wizard, orchestrator, backend, store):
    sid = asyncio.run(wizard.start("aura")).session_id
    outcome = PaymentOutcome(status=PaymentStatus.confirmed, payment_id="pay_x")

    with pytest.raises(InvalidTransitionError):
        asyncio.run(orchestrator.complete(sid, outcome))

    summary_sid = asyncio.run(reach_summary(wizard))
    with pytest.raises(InvalidTransitionError):
        asyncio.run(orchestrator.complete(summary_sid, outcome))

    assert backend.bookings == {}
    assert store.get_state(sid).step == WizardStep.booking


def test_confirmed_outcome_must_name_the_open_order(wizard, orchestrator, backend, store):
    sid = asyncio.run(reach_summary(wizard))
    checkout = asyncio.run(orchestrator.confirm(sid))

    with pytest.raises(PostPaymentBookingError):
        asyncio.run(orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.confirmed, payment_id="pay_1")))
    assert backend.bookings == {}
    assert store.get_state(sid).busy is True

    result = asyncio.run(orchestrator.complete(sid, _confirmed(checkout, payment_id="pay_1")))
    assert result.redirect_to == SUCCESS_PAGE


def test_paid_draft_is_revalidated_before_booking(catalog, store, gateway):
    backend = FlakyBookingBackend(failures=0)
    wizard = make_wizard(backend, catalog, store)
    orchestrator = make_orchestrator(backend, gateway, store)
    sid = asyncio.run(reach_summary(wizard))
    checkout = asyncio.run(orchestrator.confirm(sid))
    state = store.get_state(sid)
    store.set_state(sid, replace(state, draft=replace(state.draft, event_type=None)))

    with pytest.raises(PostPaymentBookingError):
        asyncio.run(orchestrator.complete(sid, _confirmed(checkout)))

    assert backend.payloads == []
    assert store.get_state(sid).captured_payment_id == "pay_123"


def test_captured_payment_locks_the_session(catalog, store):
    backend = FlakyBookingBackend(failures=1)
    gateway = RecordingGateway()
    wizard = make_wizard(backend, catalog, store)
    orchestrator = make_orchestrator(backend, gateway, store)

    async def scenario():
        sid = await reach_summary(wizard)
        checkout = await orchestrator.confirm(sid)
        with pytest.raises(PostPaymentBookingError):
            await orchestrator.complete(sid, _confirmed(checkout))

        state = store.get_state(sid)
        assert state.captured_payment_id == "pay_123"
        assert state.busy is False

        with pytest.raises(InvalidTransitionError):
            await orchestrator.confirm(sid)
        with pytest.raises(InvalidTransitionError):
            wizard.back(sid)
        with pytest.raises(InvalidTransitionError):
            await orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.cancelled))
        with pytest.raises(InvalidTransitionError):
            await orchestrator.complete(sid, _confirmed(checkout, payment_id="pay_other"))

        return await orchestrator.complete(sid, _confirmed(checkout))

    result = asyncio.run(scenario())

    assert result.redirect_to == SUCCESS_PAGE
    assert len(gateway.requests) == 1
    assert [p["payment_id"] for p in backend.payloads] == ["pay_123", "pay_123"]
    assert len(backend.bookings) == 1


def test_open_checkout_blocks_edits_and_second_checkout(wizard, orchestrator, store):
    sid = asyncio.run(reach_summary(wizard))
    asyncio.run(orchestrator.confirm(sid))

    with pytest.raises(InvalidTransitionError):
        wizard.back(sid)
    with pytest.raises(InvalidTransitionError):
        asyncio.run(orchestrator.confirm(sid))
    assert store.get_state(sid).step == WizardStep.summary

    asyncio.run(orchestrator.complete(sid, PaymentOutcome(status=PaymentStatus.cancelled)))
    assert wizard.back(sid).state.step == WizardStep.addons
