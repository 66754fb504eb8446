from __future__ import annotations

import logging
from typing import Any

import httpx

from venue_booking.application.exceptions import BackendError
from venue_booking.application.ports.backend import BackendPort
from venue_booking.core.config import settings
from venue_booking.domain.entities.slot import Slot
from venue_booking.domain.entities.venue import Venue


class SupabaseBackend(BackendPort):
    """Venues table, availability RPC and the secure-booking edge function over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        couple_venue_name: str | None = None,
        booking_function: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.SUPABASE_URL or "").rstrip("/")
        self._api_key = api_key or settings.SUPABASE_ANON_KEY
        self._couple_venue_name = couple_venue_name or settings.COUPLE_VENUE_NAME
        self._booking_function = booking_function or settings.SECURE_BOOKING_FUNCTION
        self._client = client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("SUPABASE_URL is required for the Supabase backend")
        if not self._api_key:
            raise ValueError("SUPABASE_ANON_KEY is required for the Supabase backend")

    async def list_venues(self) -> list[Venue]:
        rows = await self._request("GET", "/rest/v1/venues", params={"select": "*", "order": "name.asc"})
        return [self._to_venue(row) for row in rows or []]

    async def get_venue(self, venue_id: str) -> Venue | None:
        rows = await self._request(
            "GET",
            "/rest/v1/venues",
            params={"select": "*", "id": f"eq.{venue_id}", "limit": 1},
        )
        if not rows:
            return None
        return self._to_venue(rows[0])

    async def get_available_slots(self, venue_id: str, booking_date: str) -> list[Slot]:
        rows = await self._request(
            "POST",
            "/rest/v1/rpc/get_available_slots",
            json={"p_venue_id": venue_id, "p_date": booking_date},
        )
        slots: list[Slot] = []
        for row in rows or []:
            try:
                slots.append(
                    Slot(
                        slot_id=str(row["slot_id"]),
                        start_time=str(row["start_time"]),
                        end_time=str(row["end_time"]),
                    )
                )
            except (KeyError, TypeError):
                self._logger.warning("Skipping malformed slot row", extra={"venue_id": venue_id})
                continue
        return slots

    async def create_secure_booking(self, payload: dict[str, Any], idempotency_key: str) -> dict[str, Any]:
        data = await self._request(
            "POST",
            f"/functions/v1/{self._booking_function}",
            json=payload,
            headers={"Idempotency-Key": idempotency_key},
        )
        if isinstance(data, dict) and data.get("error"):
            raise BackendError(f"secure-booking rejected the request: {data['error']}")
        self._logger.info(
            "Secure booking created",
            extra={"venue_id": payload.get("venue_id"), "payment_id": payload.get("payment_id")},
        )
        return data if isinstance(data, dict) else {"result": data}

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        request_headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        request_headers.update(headers or {})
        try:
            response = await self._client.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=request_headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Supabase request failed",
                extra={"reason": f"{method} {path} -> {e.response.status_code}"},
            )
            raise BackendError(f"{method} {path} failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Supabase request error", extra={"reason": f"{method} {path}: {e}"})
            raise BackendError(f"{method} {path} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"{method} {path} returned invalid JSON") from e

    def _to_venue(self, row: dict[str, Any]) -> Venue:
        name = str(row.get("name") or "")
        return Venue(
            id=str(row["id"]),
            name=name,
            price=int(row.get("price") or 0),
            capacity=int(row.get("base_members") or row.get("capacity") or 1),
            image=row.get("image"),
            screen_size=row.get("screen_size"),
            decoration_fee=settings.DECORATION_FEE,
            features=tuple(row.get("features") or ()),
            refund_policy=row.get("refund_policy"),
            is_couple_venue=name.strip().lower() == self._couple_venue_name.strip().lower(),
        )
