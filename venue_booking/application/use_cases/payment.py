from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any

from venue_booking.application.exceptions import (
    BackendError,
    DraftInvalidError,
    InvalidTransitionError,
    PaymentGatewayError,
    PostPaymentBookingError,
    RateLimitedError,
)
from venue_booking.application.ports.backend import BackendPort
from venue_booking.application.ports.payment_gateway import PaymentGatewayPort
from venue_booking.application.ports.rate_limiter import RateLimiterPort
from venue_booking.application.ports.session_store import WizardSessionStorePort
from venue_booking.application.use_cases.pricing import DEFAULT_ADVANCE_AMOUNT
from venue_booking.application.utils.idempotency import generate_idempotency_key
from venue_booking.application.utils.validation import (
    sanitize_input,
    validate_booking_name,
    validate_email,
    validate_phone,
)
from venue_booking.domain.entities.booking_draft import BookingDraft
from venue_booking.domain.entities.payment import (
    CheckoutSession,
    PaymentIntentRequest,
    PaymentOutcome,
    PaymentStatus,
)
from venue_booking.domain.entities.venue import Venue
from venue_booking.domain.entities.wizard_state import WizardState, WizardStep

SUCCESS_PAGE = "/booking-success"
CANCELLED_MESSAGE = "Payment was cancelled. Please try again."
CHECKOUT_FAILED_MESSAGE = "Could not start the payment. Please try again."
POST_PAYMENT_FAILURE_MESSAGE = "Payment successful but booking failed. Please contact support."


@dataclass(frozen=True)
class CompletionResult:
    status: PaymentStatus
    redirect_to: str | None = None
    message: str | None = None
    booking: dict[str, Any] | None = None


class PaymentOrchestrator:
    """
    Final confirmation for a wizard session.

    confirm() validates the whole draft, throttles, and opens a checkout;
    complete() receives the widget's single outcome and records the booking.
    """

    def __init__(
        self,
        backend: BackendPort,
        gateway: PaymentGatewayPort,
        store: WizardSessionStorePort,
        booking_rate_limiter: RateLimiterPort,
        business_name: str,
        advance_amount: int = DEFAULT_ADVANCE_AMOUNT,
        currency: str = "INR",
        business_logo: str | None = None,
        theme_color: str = "#DB2777",
    ) -> None:
        self._backend = backend
        self._gateway = gateway
        self._store = store
        self._booking_rate_limiter = booking_rate_limiter
        self._business_name = business_name
        self._advance_amount = advance_amount
        self._currency = currency
        self._business_logo = business_logo
        self._theme_color = theme_color
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def validate_final_booking(draft: BookingDraft) -> list[str]:
        errors: list[str] = []
        if not validate_booking_name(draft.booking_name):
            errors.append("Invalid booking name")
        if not validate_email(draft.email):
            errors.append("Invalid email address")
        if not validate_phone(draft.phone):
            errors.append("Invalid phone number")
        if not draft.selected_date or not draft.slot_id:
            errors.append("Missing date or slot selection")
        if not draft.event_type:
            errors.append("Please select an event type")
        return errors

    async def confirm(self, session_id: str) -> CheckoutSession:
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)
        if state.step != WizardStep.summary:
            raise InvalidTransitionError("Booking can only be confirmed from the summary step")
        if state.captured_payment_id:
            raise InvalidTransitionError(
                "Payment was already received for this booking. Retry completion or contact support."
            )
        if state.busy:
            raise InvalidTransitionError("A payment is already in progress for this booking")

        failures = self.validate_final_booking(state.draft)
        if failures:
            message = ", ".join(failures)
            self._set(session_id, replace(state, message=message, busy=False))
            raise DraftInvalidError(failures)

        key = f"{state.draft.email}_booking"
        if not self._booking_rate_limiter.is_allowed(key):
            remaining = math.ceil(self._booking_rate_limiter.get_remaining_time(key) / 1000)
            message = f"Too many booking attempts. Please wait {remaining} seconds before trying again."
            self._set(session_id, replace(state, message=message, busy=False))
            raise RateLimitedError(message, remaining)

        request = self.build_payment_request(session_id, venue, state)
        self._set(session_id, replace(state, busy=True, message=None))

        try:
            checkout = await self._gateway.create_checkout(request)
        except PaymentGatewayError as e:
            self._logger.error(
                "Error opening checkout",
                extra={"session_id": session_id, "venue_id": venue.id, "reason": str(e)},
            )
            self._set(session_id, replace(state, busy=False, message=CHECKOUT_FAILED_MESSAGE))
            raise

        self._set(session_id, replace(state, busy=True, message=None, pending_order_id=checkout.order_id))
        self._logger.info(
            "Checkout opened",
            extra={"session_id": session_id, "venue_id": venue.id, "payment_id": checkout.order_id},
        )
        return checkout

    async def complete(self, session_id: str, outcome: PaymentOutcome) -> CompletionResult:
        """
        Handle the widget's outcome: confirmed, cancelled or failed.

        A confirmed outcome is only accepted for the checkout this session
        opened. Once the payment is captured, the session is locked to that
        payment until the booking call succeeds.
        """
        state = self._store.get_state(session_id)
        venue = self._store.get_venue(session_id)

        if outcome.status != PaymentStatus.confirmed and state.captured_payment_id:
            raise InvalidTransitionError("Payment was already received for this booking. Please contact support.")

        if outcome.status == PaymentStatus.cancelled:
            self._logger.info("Payment cancelled", extra={"session_id": session_id})
            self._set(session_id, replace(state, busy=False, pending_order_id=None, message=CANCELLED_MESSAGE))
            return CompletionResult(status=PaymentStatus.cancelled, message=CANCELLED_MESSAGE)

        if outcome.status == PaymentStatus.failed:
            reason = sanitize_input(outcome.reason)
            message = f"Payment failed: {reason}. Please try again." if reason else "Payment failed. Please try again."
            self._logger.warning("Payment failed", extra={"session_id": session_id, "reason": reason})
            self._set(session_id, replace(state, busy=False, pending_order_id=None, message=message))
            return CompletionResult(status=PaymentStatus.failed, message=message)

        if not outcome.payment_id:
            raise ValueError("payment_id is required for a confirmed payment")

        if state.step != WizardStep.summary or not state.pending_order_id:
            raise InvalidTransitionError("No checkout is open for this booking session")
        if state.captured_payment_id:
            if outcome.payment_id != state.captured_payment_id:
                raise InvalidTransitionError("This booking was already paid with a different payment")
        elif not state.busy:
            raise InvalidTransitionError("No checkout is open for this booking session")

        if not self._is_verified(state, outcome):
            self._logger.error(
                "Payment verification failed",
                extra={"session_id": session_id, "payment_id": outcome.payment_id},
            )
            self._set(session_id, replace(state, message=POST_PAYMENT_FAILURE_MESSAGE))
            raise PostPaymentBookingError(POST_PAYMENT_FAILURE_MESSAGE)

        captured = replace(
            state,
            busy=False,
            captured_payment_id=outcome.payment_id,
            message=POST_PAYMENT_FAILURE_MESSAGE,
        )

        failures = self.validate_final_booking(state.draft)
        if failures:
            self._logger.error(
                "Paid draft failed validation",
                extra={"session_id": session_id, "payment_id": outcome.payment_id, "reason": ", ".join(failures)},
            )
            self._set(session_id, captured)
            raise PostPaymentBookingError(POST_PAYMENT_FAILURE_MESSAGE)

        payload = self.build_booking_payload(venue, state.draft, outcome.payment_id)
        idempotency_key = generate_idempotency_key(
            "secure_booking",
            outcome.payment_id,
            {"venue_id": venue.id, "slot_id": state.draft.slot_id, "booking_date": state.draft.selected_date},
        )

        try:
            booking = await self._backend.create_secure_booking(payload, idempotency_key)
        except BackendError as e:
            self._logger.error(
                "Booking failed after payment",
                extra={"session_id": session_id, "payment_id": outcome.payment_id, "reason": str(e)},
            )
            self._set(session_id, captured)
            raise PostPaymentBookingError(POST_PAYMENT_FAILURE_MESSAGE) from e

        self._store.discard(session_id)
        self._logger.info(
            "Booking confirmed",
            extra={"session_id": session_id, "venue_id": venue.id, "payment_id": outcome.payment_id},
        )
        return CompletionResult(status=PaymentStatus.confirmed, redirect_to=SUCCESS_PAGE, booking=booking)

    def build_payment_request(self, session_id: str, venue: Venue, state: WizardState) -> PaymentIntentRequest:
        draft = state.draft
        return PaymentIntentRequest(
            amount=self._advance_amount * 100,
            currency=self._currency,
            receipt=f"wiz_{session_id.replace('-', '')[:32]}",
            name=self._business_name,
            description=f"Booking for {venue.name}",
            image=self._business_logo,
            prefill={
                "name": sanitize_input(draft.booking_name),
                "email": sanitize_input(draft.email),
                "contact": sanitize_input(draft.phone),
            },
            notes={
                "venue_id": venue.id,
                "booking_date": draft.selected_date or "",
                "slot_id": draft.slot_id or "",
            },
            theme_color=self._theme_color,
        )

    @staticmethod
    def build_booking_payload(venue: Venue, draft: BookingDraft, payment_id: str) -> dict[str, Any]:
        cake_selection = ", ".join(
            f"{sanitize_input(cake.name)} ({cake.type}, {cake.weight}) x{cake.quantity}" for cake in draft.cakes
        )
        return {
            "venue_id": venue.id,
            "slot_id": draft.slot_id,
            "booking_date": draft.selected_date,
            "booking_name": sanitize_input(draft.booking_name),
            "persons": int(draft.persons),
            "whatsapp": sanitize_input(draft.phone),
            "email": sanitize_input(draft.email),
            "decoration": draft.decoration,
            "advance_paid": True,
            "payment_id": payment_id,
            "event_type": sanitize_input(draft.event_type),
            "cake_selection": cake_selection,
            "selected_addons": ", ".join(sanitize_input(name) for name in draft.add_ons),
        }

    def _is_verified(self, state: WizardState, outcome: PaymentOutcome) -> bool:
        if not outcome.order_id or outcome.order_id != state.pending_order_id:
            return False
        return self._gateway.verify(outcome)

    def _set(self, session_id: str, state: WizardState) -> None:
        self._store.set_state(session_id, state)
