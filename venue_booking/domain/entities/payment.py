from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PaymentStatus(str, Enum):
    confirmed = "confirmed"
    cancelled = "cancelled"
    failed = "failed"


@dataclass(frozen=True)
class PaymentIntentRequest:
    amount: int  # minor currency units (paise)
    currency: str
    receipt: str
    name: str
    description: str
    image: str | None = None
    prefill: dict[str, str] = field(default_factory=dict)
    notes: dict[str, str] = field(default_factory=dict)
    theme_color: str = "#DB2777"


@dataclass(frozen=True)
class CheckoutSession:
    order_id: str
    key_id: str
    request: PaymentIntentRequest


@dataclass(frozen=True)
class PaymentOutcome:
    """What the checkout widget reported back, as one of three outcomes."""

    status: PaymentStatus
    payment_id: str | None = None
    order_id: str | None = None
    signature: str | None = None
    reason: str | None = None
