import pytest
from datetime import datetime, timezone
from pydantic import ValidationError
from utmify_tracker.models.schemas import OrderStatus, PaymentMethod, Product
from utmify_tracker.utmify.dates import InvalidDateError
from utmify_tracker.utmify.orders import build_order_request, products_total_in_cents

CUSTOMER = {
    "name": "Maria Silva",
    "email": "maria@example.com",
    "phone": None,
    "document": "12345678900",
}
PRODUCTS = [
    {
        "id": "P1",
        "name": "Curso",
        "planId": None,
        "planName": None,
        "quantity": 2,
        "priceInCents": 5000,
    }
]
COMMISSION = {
    "totalPriceInCents": 10000,
    "gatewayFeeInCents": 500,
    "userCommissionInCents": 9500,
}


def build(**overrides):
    kwargs = dict(
        order_id="ORD-1",
        platform="MyStore",
        payment_method="credit_card",
        status="approved",
        created_at="2024-01-15T10:30:45.123Z",
        customer=CUSTOMER,
        products=PRODUCTS,
        commission=COMMISSION,
    )
    kwargs.update(overrides)
    return build_order_request(**kwargs)


def test_build_applies_status_mapping_and_date_format():
    order = build(approved_at=datetime(2024, 1, 15, 10, 31, tzinfo=timezone.utc))

    assert order.status == OrderStatus.PAID
    assert order.payment_method == PaymentMethod.CREDIT_CARD
    assert order.created_at == "2024-01-15 10:30:45"
    assert order.approved_date == "2024-01-15 10:31:00"
    assert order.refunded_at is None


def test_build_unknown_status_falls_back_to_waiting_payment():
    assert build(status="STARTED").status == OrderStatus.WAITING_PAYMENT


def test_build_defaults_tracking_parameters_to_nulls():
    payload = build().to_payload()
    assert set(payload["trackingParameters"].values()) == {None}


def test_build_keeps_tracking_parameters():
    order = build(tracking_parameters={"utm_source": "google", "sck": "abc"})
    assert order.tracking_parameters.utm_source == "google"
    assert order.tracking_parameters.sck == "abc"


def test_build_test_flag():
    assert "isTest" not in build().to_payload()
    assert build(is_test=True).to_payload()["isTest"] is True


def test_build_rejects_unparseable_dates():
    with pytest.raises(InvalidDateError):
        build(refunded_at="yesterday")


def test_build_requires_created_at():
    with pytest.raises(ValidationError):
        build(created_at=None)


def test_build_rejects_unknown_payment_method():
    with pytest.raises(ValidationError):
        build(payment_method="BILLET")


def test_products_total_in_cents():
    products = [Product.model_validate(p) for p in PRODUCTS]
    assert products_total_in_cents(products) == 10000
    assert products_total_in_cents([]) == 0
