from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PriceBreakdown:
    base_price: int
    decoration_fee: int
    cakes_total: int
    add_ons_total: int
    subtotal: int
    advance_amount: int  # collected online, includes the convenience fee
    balance_amount: int  # paid at the venue
