from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from venue_booking.core.config import settings
from venue_booking.application.ports.backend import BackendPort
from venue_booking.application.ports.catalog import CatalogPort
from venue_booking.application.ports.payment_gateway import PaymentGatewayPort
from venue_booking.application.ports.session_store import WizardSessionStorePort
from venue_booking.application.use_cases.payment import PaymentOrchestrator
from venue_booking.application.use_cases.wizard import BookingWizardUseCase
from venue_booking.application.utils.rate_limiter import RateLimiter
from venue_booking.infrastructure.backend.mock_backend import MockBackend
from venue_booking.infrastructure.backend.supabase_backend import SupabaseBackend
from venue_booking.infrastructure.catalog.catalog_store import CatalogStore
from venue_booking.infrastructure.payments.mock_gateway import MockPaymentGateway
from venue_booking.infrastructure.payments.razorpay_gateway import RazorpayGateway
from venue_booking.infrastructure.store.memory_store import MemoryWizardSessionStore


logger = logging.getLogger(__name__)


def _is_local() -> bool:
    return settings.ENV.lower() in {"dev", "local"}


@lru_cache
def get_backend() -> BackendPort:
    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        if _is_local():
            logger.info("Using MockBackend (Supabase credentials missing, ENV=dev/local)")
            return MockBackend()
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required outside dev/local.")
    logger.info("Using SupabaseBackend")
    return SupabaseBackend()


@lru_cache
def get_payment_gateway() -> PaymentGatewayPort:
    if not settings.RAZORPAY_KEY_ID or not settings.RAZORPAY_KEY_SECRET:
        if _is_local():
            logger.info("Using MockPaymentGateway (Razorpay keys missing, ENV=dev/local)")
            return MockPaymentGateway()
        raise ValueError("RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET are required outside dev/local.")
    logger.info("Using RazorpayGateway")
    return RazorpayGateway()


@lru_cache
def get_catalog() -> CatalogPort:
    return CatalogStore()


@lru_cache
def get_session_store() -> WizardSessionStorePort:
    return MemoryWizardSessionStore()


@lru_cache
def get_form_rate_limiter() -> RateLimiter:
    return RateLimiter(
        max_requests=settings.FORM_RATE_LIMIT_MAX_REQUESTS,
        window_ms=settings.FORM_RATE_LIMIT_WINDOW_SECONDS * 1000,
    )


@lru_cache
def get_booking_rate_limiter() -> RateLimiter:
    return RateLimiter(
        max_requests=settings.BOOKING_RATE_LIMIT_MAX_REQUESTS,
        window_ms=settings.BOOKING_RATE_LIMIT_WINDOW_SECONDS * 1000,
    )


def get_wizard_use_case() -> BookingWizardUseCase:
    return BookingWizardUseCase(
        backend=get_backend(),
        catalog=get_catalog(),
        store=get_session_store(),
        form_rate_limiter=get_form_rate_limiter(),
        timezone=ZoneInfo(settings.BUSINESS_TIMEZONE),
        advance_amount=settings.ADVANCE_AMOUNT,
    )


def get_payment_orchestrator() -> PaymentOrchestrator:
    return PaymentOrchestrator(
        backend=get_backend(),
        gateway=get_payment_gateway(),
        store=get_session_store(),
        booking_rate_limiter=get_booking_rate_limiter(),
        business_name=settings.BUSINESS_NAME,
        advance_amount=settings.ADVANCE_AMOUNT,
        currency=settings.PAYMENT_CURRENCY,
        business_logo=settings.BUSINESS_LOGO,
        theme_color=settings.PAYMENT_THEME_COLOR,
    )
