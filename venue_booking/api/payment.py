from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from venue_booking.api.errors import to_http_exception
from venue_booking.api.schemas import (
    CakesRequest,
    CheckoutResponseSchema,
    CompleteRequest,
    CompleteResponseSchema,
    DateRequest,
    DetailsUpdateRequest,
    EventTypeRequest,
    WizardViewSchema,
)
from venue_booking.application.exceptions import BackendError, BookingError
from venue_booking.application.use_cases.payment import PaymentOrchestrator
from venue_booking.application.use_cases.wizard import BookingWizardUseCase, CakeRequest
from venue_booking.domain.entities.payment import PaymentOutcome
from venue_booking.wiring.dependencies import get_payment_orchestrator, get_wizard_use_case


router = APIRouter(prefix="/payment")
logger = logging.getLogger(__name__)


@router.get("", response_model=WizardViewSchema)
async def start_wizard(
    venue: str | None = Query(None),
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    if not venue or not venue.strip():
        raise HTTPException(status_code=400, detail="No venue selected")
    try:
        view = await uc.start(venue)
    except BackendError as e:
        logger.error("Error loading venue", extra={"venue_id": venue, "reason": str(e)})
        raise HTTPException(status_code=502, detail="Error loading venue details")
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.get("/sessions/{session_id}", response_model=WizardViewSchema)
def get_wizard(session_id: str, uc: BookingWizardUseCase = Depends(get_wizard_use_case)):
    try:
        return WizardViewSchema.from_view(uc.view(session_id))
    except BookingError as e:
        raise to_http_exception(e)


@router.patch("/sessions/{session_id}/details", response_model=WizardViewSchema)
def update_details(
    session_id: str,
    req: DetailsUpdateRequest,
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        view = uc.update_details(session_id, **req.model_dump(exclude_unset=True))
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.put("/sessions/{session_id}/date", response_model=WizardViewSchema)
async def select_date(
    session_id: str,
    req: DateRequest,
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        view = await uc.select_date(session_id, req.date)
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.put("/sessions/{session_id}/event-type", response_model=WizardViewSchema)
def choose_event_type(
    session_id: str,
    req: EventTypeRequest,
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        view = uc.choose_event_type(session_id, req.name)
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.put("/sessions/{session_id}/cakes", response_model=WizardViewSchema)
def set_cakes(
    session_id: str,
    req: CakesRequest,
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        view = uc.set_cakes(
            session_id,
            [CakeRequest(name=c.name, type=c.type, weight=c.weight, quantity=c.quantity) for c in req.cakes],
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.post("/sessions/{session_id}/add-ons/{name}/toggle", response_model=WizardViewSchema)
def toggle_add_on(
    session_id: str,
    name: str,
    uc: BookingWizardUseCase = Depends(get_wizard_use_case),
):
    try:
        view = uc.toggle_add_on(session_id, name)
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.post("/sessions/{session_id}/next", response_model=WizardViewSchema)
def next_step(session_id: str, uc: BookingWizardUseCase = Depends(get_wizard_use_case)):
    try:
        view = uc.next(session_id)
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.post("/sessions/{session_id}/back", response_model=WizardViewSchema)
def back_step(session_id: str, uc: BookingWizardUseCase = Depends(get_wizard_use_case)):
    try:
        view = uc.back(session_id)
    except BookingError as e:
        raise to_http_exception(e)
    return WizardViewSchema.from_view(view)


@router.post("/sessions/{session_id}/confirm", response_model=CheckoutResponseSchema)
async def confirm(
    session_id: str,
    orchestrator: PaymentOrchestrator = Depends(get_payment_orchestrator),
):
    try:
        checkout = await orchestrator.confirm(session_id)
    except BookingError as e:
        raise to_http_exception(e)
    return CheckoutResponseSchema.from_checkout(checkout)


@router.post("/sessions/{session_id}/complete", response_model=CompleteResponseSchema)
async def complete(
    session_id: str,
    req: CompleteRequest,
    orchestrator: PaymentOrchestrator = Depends(get_payment_orchestrator),
):
    outcome = PaymentOutcome(
        status=req.status,
        payment_id=req.payment_id,
        order_id=req.order_id,
        signature=req.signature,
        reason=req.reason,
    )
    try:
        result = await orchestrator.complete(session_id, outcome)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BookingError as e:
        raise to_http_exception(e)
    return CompleteResponseSchema.from_result(result)
