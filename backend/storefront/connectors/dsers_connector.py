"""
DSers API Connector
Forwards paid orders to the supplier and reads supplier stock/pricing

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from storefront.core.config import Settings
from storefront.core.exceptions import ForwardingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DSersConfig:
    api_key: str
    api_secret: str
    base_url: str = "https://openapi.dsers.com"
    timeout: float = 30.0

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.api_secret)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DSersConfig":
        return cls(
            api_key=settings.DSERS_API_KEY,
            api_secret=settings.DSERS_API_SECRET,
            base_url=settings.DSERS_BASE_URL,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )


class DSersConnector:
    """
    Connector for the DSers open API

    Handles:
    - Order forwarding (POST /createOrder)
    - Supplier product listing for inventory sync (GET /products)

    Both calls raise ForwardingError on transport failure or non-2xx
    status; callers decide whether that is fatal.
    """

    def __init__(self, config: DSersConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport
        self.headers = {
            'Content-Type': 'application/json',
            'X-API-KEY': config.api_key,
            'X-API-SECRET': config.api_secret,
        }

    @property
    def configured(self) -> bool:
        return self.config.configured

    async def _request(self, method: str, endpoint: str, payload: Optional[Dict] = None, action: str = "request") -> Any:
        async with httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.request(method, endpoint, headers=self.headers, json=payload)
            except httpx.HTTPError as e:
                raise ForwardingError(f"DSers {action} failed: {e}") from e

        if not response.is_success:
            raise ForwardingError(f"DSers {action} failed: {response.text}")

        try:
            return response.json()
        except ValueError as e:
            raise ForwardingError(f"DSers {action} returned invalid JSON: {e}") from e

    async def create_order(self, order_payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an order to DSers for fulfillment

        Args:
            order_payload: Full order record (id, items, total, status, customer)

        Returns:
            DSers response body
        """
        return await self._request("POST", "/createOrder", order_payload, "order forwarding")

    async def fetch_products(self) -> List[Dict[str, Any]]:
        """
        Get current supplier stock and pricing

        Returns:
            List of {"id", "inventory", "price"} dicts
        """
        data = await self._request("GET", "/products", action="inventory sync")
        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list):
            raise ForwardingError("DSers inventory sync failed: response has no products list")
        return products
