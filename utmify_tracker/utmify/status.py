from utmify_tracker.models.schemas import OrderStatus

# Upstream payment vocabulary -> Utmify order status
STATUS_MAP = {
    "waiting_payment": OrderStatus.WAITING_PAYMENT,
    "pending": OrderStatus.WAITING_PAYMENT,
    "approved": OrderStatus.PAID,
    "paid": OrderStatus.PAID,
    "refused": OrderStatus.REFUSED,
    "cancelled": OrderStatus.REFUSED,
    "refunded": OrderStatus.REFUNDED,
    "chargeback": OrderStatus.CHARGEDBACK,
}


def map_status_to_utmify(status: str) -> OrderStatus:
    """Translates a payment status into a Utmify status. Unknown values fall back to waiting_payment."""
    return STATUS_MAP.get(status, OrderStatus.WAITING_PAYMENT)
