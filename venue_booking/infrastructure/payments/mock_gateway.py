from __future__ import annotations

import logging

from venue_booking.application.ports.payment_gateway import PaymentGatewayPort
from venue_booking.domain.entities.payment import (
    CheckoutSession,
    PaymentIntentRequest,
    PaymentOutcome,
    PaymentStatus,
)

MOCK_KEY_ID = "rzp_test_mock"


class MockPaymentGateway(PaymentGatewayPort):
    def __init__(self) -> None:
        self._orders: dict[str, PaymentIntentRequest] = {}
        self._logger = logging.getLogger(__name__)

    async def create_checkout(self, request: PaymentIntentRequest) -> CheckoutSession:
        order_id = f"order_mock_{len(self._orders) + 1}"
        self._orders[order_id] = request
        self._logger.info(
            "Mock checkout opened",
            extra={"payment_id": order_id, "reason": f"amount={request.amount} {request.currency}"},
        )
        return CheckoutSession(order_id=order_id, key_id=MOCK_KEY_ID, request=request)

    def verify(self, outcome: PaymentOutcome) -> bool:
        if outcome.status != PaymentStatus.confirmed or not outcome.payment_id:
            return False
        return outcome.order_id is None or outcome.order_id in self._orders
