"""
Fulfillment Service - best-effort hand-off of paid orders to DSers

forward() never raises. A paid order stays paid whatever happens here;
the outcome is logged and returned as a FulfillmentResult.

Author: TM3
Date: 2026-10-19
"""
import logging

from storefront.connectors.dsers_connector import DSersConnector
from storefront.core.exceptions import ForwardingError
from storefront.domain.fulfillment import FulfillmentResult
from storefront.domain.order import Order

logger = logging.getLogger(__name__)


class FulfillmentForwarder:

    def __init__(self, connector: DSersConnector):
        self.connector = connector

    async def forward(self, order: Order) -> FulfillmentResult:
        if not self.connector.configured:
            logger.warning(f"DSers credentials are missing. Order {order.id} not forwarded automatically.")
            return FulfillmentResult.skipped("DSers credentials missing")

        try:
            response = await self.connector.create_order(order.to_dict())
        except ForwardingError as e:
            logger.error(f"Forwarding order {order.id} to DSers failed: {e}")
            return FulfillmentResult.failed(str(e))

        logger.info(f"Order {order.id} forwarded to DSers")
        return FulfillmentResult.forwarded(response if isinstance(response, dict) else {"data": response})
