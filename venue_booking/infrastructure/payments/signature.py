from __future__ import annotations

import hmac
import logging

logger = logging.getLogger(__name__)


def verify_payment_signature(
    order_id: str | None,
    payment_id: str | None,
    signature: str | None,
    key_secret: str | None,
) -> bool:
    """Checkout signature is HMAC-SHA256 of "order_id|payment_id" keyed by the account secret."""
    if not (order_id and payment_id and signature):
        return False

    if not key_secret:
        logger.error("Missing key secret for payment signature verification")
        return False

    message = f"{order_id}|{payment_id}".encode("utf-8")
    expected = hmac.new(key_secret.encode("utf-8"), message, "sha256").hexdigest()
    return hmac.compare_digest(expected, signature)
