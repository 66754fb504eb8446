from dataclasses import asdict
from typing import Any, Literal

from pydantic import BaseModel, Field

from venue_booking.application.use_cases.payment import CompletionResult
from venue_booking.application.use_cases.wizard import WizardView
from venue_booking.domain.entities.catalog import AddOn, Cake, EventType
from venue_booking.domain.entities.payment import CheckoutSession, PaymentStatus
from venue_booking.domain.entities.venue import Venue


class VenueSchema(BaseModel):
    id: str
    name: str
    price: int
    capacity: int
    image: str | None = None
    screen_size: str | None = None
    decoration_fee: int
    features: list[str] = Field(default_factory=list)
    refund_policy: str | None = None
    decoration_mandatory: bool = False

    @classmethod
    def from_venue(cls, venue: Venue) -> "VenueSchema":
        return cls(
            id=venue.id,
            name=venue.name,
            price=venue.price,
            capacity=venue.capacity,
            image=venue.image,
            screen_size=venue.screen_size,
            decoration_fee=venue.decoration_fee,
            features=list(venue.features),
            refund_policy=venue.refund_policy,
            decoration_mandatory=venue.is_couple_venue,
        )


class AddOnSchema(BaseModel):
    id: str
    name: str
    price: int
    image: str

    @classmethod
    def from_add_on(cls, add_on: AddOn) -> "AddOnSchema":
        return cls(id=add_on.id, name=add_on.name, price=add_on.price, image=add_on.image)


class EventTypeSchema(BaseModel):
    id: str
    name: str
    icon: str

    @classmethod
    def from_event_type(cls, event_type: EventType) -> "EventTypeSchema":
        return cls(id=event_type.id, name=event_type.name, icon=event_type.icon)


class CakeSchema(BaseModel):
    id: str
    name: str
    image: str
    prices: dict[str, dict[str, int]]

    @classmethod
    def from_cake(cls, cake: Cake) -> "CakeSchema":
        p = cake.prices
        return cls(
            id=cake.id,
            name=cake.name,
            image=cake.image,
            prices={
                "egg": {"halfKg": p.egg_half_kg, "oneKg": p.egg_one_kg},
                "eggless": {"halfKg": p.eggless_half_kg, "oneKg": p.eggless_one_kg},
            },
        )


class SlotSchema(BaseModel):
    slot_id: str
    start_time: str
    end_time: str
    label: str


class CakeSelectionSchema(BaseModel):
    name: str
    type: Literal["egg", "eggless"]
    weight: Literal["halfKg", "oneKg"]
    price: int
    quantity: int


class DraftSchema(BaseModel):
    booking_name: str
    persons: str
    phone: str
    email: str
    decoration: bool
    selected_date: str | None = None
    slot_id: str | None = None
    event_type: str | None = None
    cakes: list[CakeSelectionSchema] = Field(default_factory=list)
    add_ons: list[str] = Field(default_factory=list)


class PriceSchema(BaseModel):
    base_price: int
    decoration_fee: int
    cakes_total: int
    add_ons_total: int
    subtotal: int
    advance_amount: int
    balance_amount: int


class WizardViewSchema(BaseModel):
    session_id: str
    venue: VenueSchema
    step: str
    draft: DraftSchema
    slots: list[SlotSchema] = Field(default_factory=list)
    slots_loading: bool = False
    selected_slot: str | None = None
    errors: dict[str, str] = Field(default_factory=dict)
    message: str | None = None
    busy: bool = False
    price: PriceSchema

    @classmethod
    def from_view(cls, view: WizardView) -> "WizardViewSchema":
        state = view.state
        draft = state.draft
        selected = state.selected_slot
        return cls(
            session_id=view.session_id,
            venue=VenueSchema.from_venue(view.venue),
            step=state.step.value,
            draft=DraftSchema(
                booking_name=draft.booking_name,
                persons=draft.persons,
                phone=draft.phone,
                email=draft.email,
                decoration=draft.decoration,
                selected_date=draft.selected_date,
                slot_id=draft.slot_id,
                event_type=draft.event_type,
                cakes=[
                    CakeSelectionSchema(
                        name=c.name, type=c.type, weight=c.weight, price=c.price, quantity=c.quantity
                    )
                    for c in draft.cakes
                ],
                add_ons=list(draft.add_ons),
            ),
            slots=[
                SlotSchema(slot_id=s.slot_id, start_time=s.start_time, end_time=s.end_time, label=s.label)
                for s in state.slots
            ],
            slots_loading=state.slots_loading,
            selected_slot=selected.label if selected else None,
            errors=dict(state.errors),
            message=state.message,
            busy=state.busy,
            price=PriceSchema(**asdict(view.price)),
        )


class DetailsUpdateRequest(BaseModel):
    booking_name: str | None = None
    persons: int | str | None = None
    phone: str | None = None
    email: str | None = None
    decoration: bool | None = None
    slot_id: str | None = None


class DateRequest(BaseModel):
    date: str


class EventTypeRequest(BaseModel):
    name: str


class CakeItemRequest(BaseModel):
    name: str
    type: Literal["egg", "eggless"]
    weight: Literal["halfKg", "oneKg"]
    quantity: int = Field(default=1, ge=1, le=10)


class CakesRequest(BaseModel):
    cakes: list[CakeItemRequest] = Field(default_factory=list)


class CheckoutResponseSchema(BaseModel):
    key: str
    order_id: str
    amount: int
    currency: str
    name: str
    description: str
    image: str | None = None
    prefill: dict[str, str] = Field(default_factory=dict)
    notes: dict[str, str] = Field(default_factory=dict)
    theme: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_checkout(cls, checkout: CheckoutSession) -> "CheckoutResponseSchema":
        request = checkout.request
        return cls(
            key=checkout.key_id,
            order_id=checkout.order_id,
            amount=request.amount,
            currency=request.currency,
            name=request.name,
            description=request.description,
            image=request.image,
            prefill=dict(request.prefill),
            notes=dict(request.notes),
            theme={"color": request.theme_color},
        )


class CompleteRequest(BaseModel):
    status: PaymentStatus
    payment_id: str | None = None
    order_id: str | None = None
    signature: str | None = None
    reason: str | None = None


class CompleteResponseSchema(BaseModel):
    status: PaymentStatus
    redirect_to: str | None = None
    message: str | None = None
    booking: dict[str, Any] | None = None

    @classmethod
    def from_result(cls, result: CompletionResult) -> "CompleteResponseSchema":
        return cls(
            status=result.status,
            redirect_to=result.redirect_to,
            message=result.message,
            booking=result.booking,
        )
