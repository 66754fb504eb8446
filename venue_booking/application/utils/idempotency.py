"""Idempotency keys for remote calls that may be retried after a timeout."""

from __future__ import annotations

import hashlib
import json
from typing import Any


def generate_idempotency_key(
    operation: str,
    entity_id: str,
    params: dict[str, Any] | None = None,
) -> str:
    """Deterministic SHA-256 over operation, entity and params.

    The same confirmed payment always maps to the same key, so the backend
    can collapse a retried booking call onto the first one.
    """
    key_data = {
        "operation": operation,
        "entity_id": str(entity_id),
        "params": params or {},
    }
    key_str = json.dumps(key_data, sort_keys=True)
    return hashlib.sha256(key_str.encode("utf-8")).hexdigest()
