from __future__ import annotations

import logging

import httpx

from venue_booking.application.exceptions import PaymentGatewayError
from venue_booking.application.ports.payment_gateway import PaymentGatewayPort
from venue_booking.core.config import settings
from venue_booking.domain.entities.payment import (
    CheckoutSession,
    PaymentIntentRequest,
    PaymentOutcome,
    PaymentStatus,
)
from venue_booking.infrastructure.payments.signature import verify_payment_signature


class RazorpayGateway(PaymentGatewayPort):
    def __init__(
        self,
        key_id: str | None = None,
        key_secret: str | None = None,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._key_id = key_id or settings.RAZORPAY_KEY_ID
        self._key_secret = key_secret or settings.RAZORPAY_KEY_SECRET
        self._base_url = (base_url or settings.RAZORPAY_BASE_URL).rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._key_id or not self._key_secret:
            raise ValueError("RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET are required for Razorpay")

    async def create_checkout(self, request: PaymentIntentRequest) -> CheckoutSession:
        payload = {
            "amount": request.amount,
            "currency": request.currency,
            "receipt": request.receipt,
            "notes": dict(request.notes),
        }
        try:
            response = await self._client.post(
                f"{self._base_url}/orders",
                json=payload,
                auth=(self._key_id, self._key_secret),
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Razorpay order creation failed",
                extra={"reason": f"status={e.response.status_code} body={e.response.text[:200]}"},
            )
            raise PaymentGatewayError(f"Order creation failed with status {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Razorpay order creation error", extra={"reason": str(e)})
            raise PaymentGatewayError(f"Order creation failed: {e}") from e

        order_id = data.get("id")
        if not order_id:
            raise PaymentGatewayError("No order id returned from Razorpay")

        self._logger.info("Razorpay order created", extra={"payment_id": order_id})
        return CheckoutSession(order_id=str(order_id), key_id=self._key_id, request=request)

    def verify(self, outcome: PaymentOutcome) -> bool:
        if outcome.status != PaymentStatus.confirmed:
            return False
        return verify_payment_signature(
            outcome.order_id,
            outcome.payment_id,
            outcome.signature,
            self._key_secret,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
