from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from venue_booking.application.use_cases.payment import PaymentOrchestrator
from venue_booking.application.use_cases.wizard import BookingWizardUseCase
from venue_booking.application.utils.rate_limiter import RateLimiter
from venue_booking.infrastructure.backend.mock_backend import MockBackend
from venue_booking.infrastructure.catalog.catalog_store import CatalogStore
from venue_booking.infrastructure.payments.mock_gateway import MockPaymentGateway
from venue_booking.infrastructure.store.memory_store import MemoryWizardSessionStore

TODAY = date(2026, 10, 19)
BOOKING_DATE = "2026-10-25"


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1_000.0)


@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def catalog() -> CatalogStore:
    return CatalogStore()


@pytest.fixture
def store() -> MemoryWizardSessionStore:
    return MemoryWizardSessionStore()


@pytest.fixture
def gateway() -> MockPaymentGateway:
    return MockPaymentGateway()


def make_wizard(backend, catalog, store, form_limiter: RateLimiter | None = None) -> BookingWizardUseCase:
    return BookingWizardUseCase(
        backend=backend,
        catalog=catalog,
        store=store,
        form_rate_limiter=form_limiter or RateLimiter(max_requests=100, window_ms=60_000),
        timezone=ZoneInfo("Asia/Kolkata"),
        today=lambda: TODAY,
    )


def make_orchestrator(backend, gateway, store, booking_limiter: RateLimiter | None = None) -> PaymentOrchestrator:
    return PaymentOrchestrator(
        backend=backend,
        gateway=gateway,
        store=store,
        booking_rate_limiter=booking_limiter or RateLimiter(max_requests=100, window_ms=60_000),
        business_name="Binge'N Celebration",
    )


@pytest.fixture
def wizard(backend, catalog, store) -> BookingWizardUseCase:
    return make_wizard(backend, catalog, store)


@pytest.fixture
def orchestrator(backend, gateway, store) -> PaymentOrchestrator:
    return make_orchestrator(backend, gateway, store)


async def fill_booking_step(wizard: BookingWizardUseCase, venue_id: str = "aura") -> str:
    view = await wizard.start(venue_id)
    session_id = view.session_id
    await wizard.select_date(session_id, BOOKING_DATE)
    wizard.update_details(
        session_id,
        booking_name="John Doe",
        persons="2",
        phone="9876543210",
        email="john@example.com",
    )
    return session_id


async def reach_summary(wizard: BookingWizardUseCase, venue_id: str = "aura") -> str:
    session_id = await fill_booking_step(wizard, venue_id)
    wizard.next(session_id)
    wizard.choose_event_type(session_id, "Birthday")
    wizard.next(session_id)
    wizard.next(session_id)
    wizard.next(session_id)
    return session_id
