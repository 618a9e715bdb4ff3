"""
Utmify orders client.

Posts order events to the Utmify tracking API. Delivery is best effort:
`send_order` reports every outcome through its return value and never raises.
"""
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from utmify_tracker.config import Config, UTMIFY_ORDERS_URL
from utmify_tracker.models.schemas import OrderRequest
from utmify_tracker.utmify.results import (
    InvalidInput,
    ProviderRejected,
    SendResult,
    SendSuccess,
    TransportFailure,
)

logger = logging.getLogger(__name__)


def redact_token(token: str, visible: int = 4) -> str:
    """Keeps only a short prefix of a credential for log output."""
    if not token:
        return "<empty>"
    if len(token) <= visible * 2:
        return "***"
    return f"{token[:visible]}..."


class UtmifyClient:
    API_URL = UTMIFY_ORDERS_URL

    def __init__(
        self,
        api_token: str,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_token = api_token or ""
        self.api_url = api_url or self.API_URL
        self.timeout = timeout
        self._transport = transport

        if not self.api_token:
            logger.warning(
                "UTMIFY_API_TOKEN is empty; Utmify will reject every order."
            )

    @classmethod
    def from_config(
        cls,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "UtmifyClient":
        return cls(
            api_token=config.utmify_api_token,
            api_url=config.utmify_api_url,
            timeout=config.utmify_timeout,
            transport=transport,
        )

    def get_headers(self) -> Dict[str, str]:
        return {
            "x-api-token": self.api_token,
            "Content-Type": "application/json",
        }

    def _log_order(self, order: OrderRequest):
        logger.info(
            "Sending order %s to %s (token %s)",
            order.order_id,
            self.api_url,
            redact_token(self.api_token),
        )
        logger.info(
            "Order %s: status=%s customer=%s <%s> products=%d total=%.2f",
            order.order_id,
            order.status.value,
            order.customer.name,
            order.customer.email,
            len(order.products),
            order.commission.total_price_in_cents / 100,
        )

    async def send_order(
        self, order: Union[OrderRequest, Mapping[str, Any]]
    ) -> SendResult:
        """
        Posts one order to Utmify.

        Returns SendSuccess on a 2xx answer, ProviderRejected on any other
        status, TransportFailure when no answer was obtained and InvalidInput
        when `order` is a mapping that does not validate.
        """
        if not isinstance(order, OrderRequest):
            try:
                order = OrderRequest.model_validate(order)
            except ValidationError as e:
                logger.error("Refusing to send invalid order: %s", e)
                return InvalidInput(error=str(e))

        order_id = getattr(order, "order_id", None)
        try:
            self._log_order(order)
            body = order.to_json()
            logger.debug("Request body: %s", body)

            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.post(
                    self.api_url, headers=self.get_headers(), content=body
                )

            logger.info("Utmify answered %s for order %s", response.status_code, order_id)
            logger.debug("Response headers: %s", json.dumps(dict(response.headers)))
            response_text = response.text
            logger.debug("Response body: %s", response_text)
        except Exception as e:
            logger.error("Failed to send order %s to Utmify: %r", order_id, e)
            return TransportFailure(error=f"{type(e).__name__}: {e}")

        if not response.is_success:
            logger.error(
                "Utmify rejected order %s with status %s: %s",
                order_id,
                response.status_code,
                response_text,
            )
            return ProviderRejected(
                status_code=response.status_code,
                error=response_text,
                response=response_text,
            )

        logger.info("Order %s sent to Utmify (status %s)", order_id, order.status.value)
        return SendSuccess(response=response_text)
