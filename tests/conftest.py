import pytest
from utmify_tracker.models.schemas import OrderRequest


@pytest.fixture
def order_payload():
    """A complete order in Utmify wire format."""
    return {
        "orderId": "ORD-1001",
        "platform": "MyStore",
        "paymentMethod": "pix",
        "status": "paid",
        "createdAt": "2024-01-15 10:30:45",
        "approvedDate": "2024-01-15 10:35:00",
        "refundedAt": None,
        "customer": {
            "name": "Maria Silva",
            "email": "maria@example.com",
            "phone": "5511999999999",
            "document": None,
            "country": "BR",
        },
        "products": [
            {
                "id": "P1",
                "name": "Curso Online",
                "planId": None,
                "planName": None,
                "quantity": 1,
                "priceInCents": 19700,
            },
            {
                "id": "P2",
                "name": "Ebook",
                "planId": "PL2",
                "planName": "Anual",
                "quantity": 2,
                "priceInCents": 2990,
            },
        ],
        "trackingParameters": {
            "src": None,
            "sck": None,
            "utm_source": "facebook",
            "utm_campaign": "black_friday",
            "utm_medium": "cpc",
            "utm_content": None,
            "utm_term": None,
        },
        "commission": {
            "totalPriceInCents": 25680,
            "gatewayFeeInCents": 1284,
            "userCommissionInCents": 24396,
            "currency": "BRL",
        },
    }


@pytest.fixture
def order(order_payload):
    return OrderRequest.model_validate(order_payload)
