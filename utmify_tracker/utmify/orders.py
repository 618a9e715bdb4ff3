from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from utmify_tracker.models.schemas import (
    Commission,
    Customer,
    OrderRequest,
    Product,
    TrackingParameters,
)
from utmify_tracker.utmify.dates import format_utmify_date
from utmify_tracker.utmify.status import map_status_to_utmify

DateInput = Union[datetime, str, None]


def build_order_request(
    order_id: str,
    platform: str,
    payment_method: str,
    status: str,
    created_at: DateInput,
    customer: Union[Customer, Mapping[str, Any]],
    products: Sequence[Union[Product, Mapping[str, Any]]],
    commission: Union[Commission, Mapping[str, Any]],
    approved_at: DateInput = None,
    refunded_at: DateInput = None,
    tracking_parameters: Optional[Union[TrackingParameters, Mapping[str, Any]]] = None,
    is_test: Optional[bool] = None,
) -> OrderRequest:
    """
    Builds an OrderRequest from upstream values.

    `status` may use the payment provider's vocabulary; it is normalized with
    map_status_to_utmify. Dates are formatted with format_utmify_date and raise
    InvalidDateError when unparseable. Other malformed fields raise pydantic's
    ValidationError.
    """
    data: Dict[str, Any] = {
        "orderId": order_id,
        "platform": platform,
        "paymentMethod": payment_method,
        "status": map_status_to_utmify(status),
        "createdAt": format_utmify_date(created_at),
        "approvedDate": format_utmify_date(approved_at),
        "refundedAt": format_utmify_date(refunded_at),
        "customer": customer,
        "products": list(products),
        "trackingParameters": tracking_parameters or TrackingParameters(),
        "commission": commission,
    }
    if is_test is not None:
        data["isTest"] = is_test
    return OrderRequest.model_validate(data)


def products_total_in_cents(products: List[Product]) -> int:
    return sum(p.price_in_cents * p.quantity for p in products)
