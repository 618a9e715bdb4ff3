from datetime import datetime
from enum import Enum
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    field_validator,
    model_serializer,
)

# YYYY-MM-DD HH:MM:SS, UTC, no fraction and no zone designator
UTMIFY_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}$"
UTMIFY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class OrderStatus(str, Enum):
    WAITING_PAYMENT = "waiting_payment"
    PAID = "paid"
    REFUSED = "refused"
    REFUNDED = "refunded"
    CHARGEDBACK = "chargedback"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    BOLETO = "boleto"
    PIX = "pix"
    PAYPAL = "paypal"
    FREE_PRICE = "free_price"


class Currency(str, Enum):
    BRL = "BRL"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    ARS = "ARS"
    CAD = "CAD"
    COP = "COP"
    MXN = "MXN"
    PYG = "PYG"
    CLP = "CLP"
    PEN = "PEN"
    PLN = "PLN"


class UtmifyModel(BaseModel):
    """
    Base for the Utmify wire models.

    Nullable keys are always emitted (as null when empty). Keys listed in
    `omit_when_none` are optional in the Utmify contract and are left out of
    the payload when they carry no value.
    """

    model_config = ConfigDict(populate_by_name=True)

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def _drop_absent_optionals(self, handler, info: SerializationInfo):
        data = handler(self)
        for name in self.omit_when_none:
            field = type(self).model_fields[name]
            key = (field.alias or name) if info.by_alias else name
            if key in data and data[key] is None:
                del data[key]
        return data


class Customer(UtmifyModel):
    name: str
    email: str
    phone: Optional[str]
    document: Optional[str] = Field(
        description="CPF, CNPJ or other identification document"
    )
    country: Optional[str] = Field(
        None, pattern=r"^[A-Z]{2}$", description="ISO 3166-1 alpha-2"
    )
    ip: Optional[str] = None

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"country", "ip"})


class Product(UtmifyModel):
    id: str
    name: str
    plan_id: Optional[str] = Field(alias="planId")
    plan_name: Optional[str] = Field(alias="planName")
    quantity: int = Field(ge=0)
    price_in_cents: int = Field(alias="priceInCents")


class TrackingParameters(UtmifyModel):
    src: Optional[str] = None
    sck: Optional[str] = None
    utm_source: Optional[str] = None
    utm_campaign: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_content: Optional[str] = None
    utm_term: Optional[str] = None


class Commission(UtmifyModel):
    total_price_in_cents: int = Field(alias="totalPriceInCents")
    gateway_fee_in_cents: int = Field(alias="gatewayFeeInCents")
    user_commission_in_cents: int = Field(alias="userCommissionInCents")
    currency: Optional[Currency] = None

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"currency"})


class OrderRequest(UtmifyModel):
    """Order event as accepted by the Utmify orders endpoint."""

    order_id: str = Field(alias="orderId")
    platform: str
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    status: OrderStatus
    created_at: str = Field(alias="createdAt", pattern=UTMIFY_DATE_PATTERN)
    approved_date: Optional[str] = Field(
        alias="approvedDate", pattern=UTMIFY_DATE_PATTERN
    )
    refunded_at: Optional[str] = Field(alias="refundedAt", pattern=UTMIFY_DATE_PATTERN)
    customer: Customer
    products: List[Product]
    tracking_parameters: TrackingParameters = Field(alias="trackingParameters")
    commission: Commission
    is_test: Optional[bool] = Field(None, alias="isTest")

    omit_when_none: ClassVar[FrozenSet[str]] = frozenset({"is_test"})

    @field_validator("created_at", "approved_date", "refunded_at")
    @classmethod
    def _check_calendar_date(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                datetime.strptime(v, UTMIFY_DATE_FORMAT)
            except ValueError:
                raise ValueError(f"not a valid date and time: {v!r}")
        return v

    def to_payload(self) -> dict:
        """JSON-ready dict using the Utmify key names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
