"""
PayPal REST Connector
Creates and captures checkout orders through the PayPal Orders v2 API

A fresh OAuth token is requested for every operation. There is no retry:
a rejected request is reported to the caller as AuthError or GatewayError
with PayPal's response body as the message.

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

from storefront.core.config import Settings
from storefront.core.exceptions import AuthError, GatewayError
from storefront.services.pricing_service import format_amount

logger = logging.getLogger(__name__)

LIVE_BASE_URL = "https://api-m.paypal.com"
SANDBOX_BASE_URL = "https://api-m.sandbox.paypal.com"


@dataclass(frozen=True)
class PayPalConfig:
    client_id: str
    client_secret: str
    environment: str = "sandbox"
    currency: str = "EUR"
    timeout: float = 30.0

    @property
    def base_url(self) -> str:
        return LIVE_BASE_URL if self.environment == "live" else SANDBOX_BASE_URL

    @classmethod
    def from_settings(cls, settings: Settings) -> "PayPalConfig":
        return cls(
            client_id=settings.PAYPAL_CLIENT_ID,
            client_secret=settings.PAYPAL_CLIENT_SECRET,
            environment=settings.PAYPAL_ENVIRONMENT,
            currency=settings.PAYPAL_CURRENCY,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )


class PayPalConnector:
    """
    Connector for the PayPal REST API

    Handles:
    - Client-credentials token exchange
    - Order creation (intent CAPTURE, single purchase unit)
    - Order capture after the buyer approves in the PayPal popup
    """

    def __init__(self, config: PayPalConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: Credentials and environment
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        self.base_url = config.base_url
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    async def authenticate(self) -> str:
        """
        Exchange client id/secret for a bearer token

        Returns:
            Access token string

        Raises:
            AuthError: credentials missing, request failed or non-2xx status
        """
        if not self.config.client_id or not self.config.client_secret:
            raise AuthError("PayPal credentials not configured. Set PAYPAL_CLIENT_ID and PAYPAL_CLIENT_SECRET")

        async with self._client() as client:
            try:
                response = await client.post(
                    "/v1/oauth2/token",
                    auth=(self.config.client_id, self.config.client_secret),
                    data={"grant_type": "client_credentials"},
                )
            except httpx.HTTPError as e:
                raise AuthError(f"PayPal token request failed: {e}") from e

        if not response.is_success:
            raise AuthError(f"PayPal token request failed: {response.text}")

        try:
            data = response.json()
        except ValueError:
            data = None
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise AuthError(f"PayPal token response has no access_token: {response.text}")
        return token

    async def _post(self, endpoint: str, token: str, payload: Optional[Dict[str, Any]], action: str) -> Dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        async with self._client() as client:
            try:
                response = await client.post(endpoint, headers=headers, json=payload)
            except httpx.HTTPError as e:
                raise GatewayError(f"PayPal {action} failed: {e}") from e

        if not response.is_success:
            logger.error(f"PayPal {action} failed: {response.status_code} - {response.text}")
            raise GatewayError(f"PayPal {action} failed: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(f"PayPal {action} returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise GatewayError(f"PayPal {action} returned unexpected body: {response.text}")
        return data

    async def create_order(self, total: Decimal) -> str:
        """
        Create a PayPal order for the given amount

        Args:
            total: Order total in the configured currency

        Returns:
            PayPal order ID
        """
        token = await self.authenticate()
        payload = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "amount": {
                        "currency_code": self.config.currency,
                        "value": format_amount(total),
                    }
                }
            ],
        }

        data = await self._post("/v2/checkout/orders", token, payload, "create order")
        if not data.get("id"):
            raise GatewayError(f"PayPal create order returned no id: {data}")

        logger.info(f"PayPal order {data['id']} created for {format_amount(total)} {self.config.currency}")
        return data["id"]

    async def capture_order(self, order_id: str) -> Dict[str, Any]:
        """
        Capture an approved PayPal order

        Returns:
            PayPal capture response
        """
        token = await self.authenticate()
        data = await self._post(f"/v2/checkout/orders/{order_id}/capture", token, None, "capture order")
        logger.info(f"PayPal order {order_id} captured (status {data.get('status')})")
        return data
