from __future__ import annotations

from abc import ABC, abstractmethod

from venue_booking.domain.entities.payment import CheckoutSession, PaymentIntentRequest, PaymentOutcome


class PaymentGatewayPort(ABC):
    @abstractmethod
    async def create_checkout(self, request: PaymentIntentRequest) -> CheckoutSession:
        """Open a checkout for the widget. Returns the order the widget must pay."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, outcome: PaymentOutcome) -> bool:
        """Check that a confirmed outcome really came from the provider."""
        raise NotImplementedError
