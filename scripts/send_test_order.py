import os
import sys
import asyncio
import argparse
from datetime import datetime, timezone

# Garante que o diretório raiz está no path para importar utmify_tracker
sys.path.append(os.getcwd())

from utmify_tracker.config import get_config, configure_logging
from utmify_tracker.utmify.client import UtmifyClient, redact_token
from utmify_tracker.models.schemas import OrderStatus
from utmify_tracker.utmify.orders import build_order_request, products_total_in_cents
from utmify_tracker.utmify.status import map_status_to_utmify


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Sends a test-mode order to Utmify to validate the API token."
    )
    parser.add_argument("--order-id", default=None, help="Defaults to TEST-<timestamp>")
    parser.add_argument("--status", default="paid", help="Upstream payment status")
    parser.add_argument("--payment-method", default="pix")
    parser.add_argument("--price-cents", type=int, default=1000)
    parser.add_argument("--email", default="test@example.com")
    parser.add_argument("--name", default="Test Customer")
    parser.add_argument("--utm-source", default=None)
    parser.add_argument("--utm-campaign", default=None)
    return parser.parse_args(argv)


def build_test_order(args, platform: str):
    now = datetime.now(timezone.utc)
    order_id = args.order_id or f"TEST-{now.strftime('%Y%m%d%H%M%S')}"
    products = [
        {
            "id": "test-product",
            "name": "Test Product",
            "planId": None,
            "planName": None,
            "quantity": 1,
            "priceInCents": args.price_cents,
        }
    ]
    total = args.price_cents
    return build_order_request(
        order_id=order_id,
        platform=platform or "utmify-tracker",
        payment_method=args.payment_method,
        status=args.status,
        created_at=now,
        approved_at=now if map_status_to_utmify(args.status) == OrderStatus.PAID else None,
        customer={
            "name": args.name,
            "email": args.email,
            "phone": None,
            "document": None,
        },
        products=products,
        tracking_parameters={
            "utm_source": args.utm_source,
            "utm_campaign": args.utm_campaign,
        },
        commission={
            "totalPriceInCents": total,
            "gatewayFeeInCents": 0,
            "userCommissionInCents": total,
        },
        is_test=True,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    config = get_config()
    configure_logging(config.log_level)

    print("--- UTMIFY TEST ORDER ---")
    print(f"Environment: {config.environment.upper()}")
    print(f"Endpoint: {config.utmify_api_url}")
    print(f"Token: {redact_token(config.utmify_api_token)}")

    try:
        order = build_test_order(args, config.utmify_platform)
    except ValueError as e:
        print(f"Invalid order arguments: {e}")
        return 1

    print(
        f"Order {order.order_id}: status={order.status.value} "
        f"total={products_total_in_cents(order.products) / 100:.2f}"
    )

    client = UtmifyClient.from_config(config)
    result = asyncio.run(client.send_order(order))

    if result.success:
        print(f"Order accepted by Utmify: {result.response}")
        return 0

    print(f"Order not delivered: {result.error}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
