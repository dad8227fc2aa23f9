"""
Order Service - checkout lifecycle

Orchestrates pricing, PayPal and the order ledger:

    create_order:  validate cart -> price it -> PayPal create -> store "pending"
    capture_order: PayPal capture -> mark "paid" -> forward to DSers

Ledger writes only happen after the PayPal call they depend on has
succeeded, so a gateway failure leaves orders.json untouched. Capturing is
not idempotent: each call reaches PayPal, and PayPal's answer to a repeated
capture is passed back unchanged.

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from storefront.connectors.paypal_connector import PayPalConnector
from storefront.core.exceptions import ValidationError
from storefront.domain.fulfillment import FulfillmentResult
from storefront.domain.order import CartItem, Order, OrderStatus
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.fulfillment_service import FulfillmentForwarder
from storefront.services.pricing_service import compute_total, format_amount

logger = logging.getLogger(__name__)


@dataclass
class CaptureOutcome:
    result: Dict[str, Any]
    order: Optional[Order] = None
    fulfillment: Optional[FulfillmentResult] = None


def parse_cart(items: Any) -> List[CartItem]:
    """
    Validate the raw items array of a checkout request

    Raises:
        ValidationError: not a list, empty, or a line without a usable id/quantity
    """
    if not isinstance(items, list):
        raise ValidationError("items must be a list")
    if not items:
        raise ValidationError("Cart is empty")

    cart = []
    for position, raw in enumerate(items):
        if not isinstance(raw, dict):
            raise ValidationError(f"items[{position}] must be an object")
        try:
            cart.append(CartItem.model_validate(raw))
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ValidationError(f"items[{position}].{field}: {first['msg']}") from e
    return cart


class OrderService:
    """
    Order lifecycle controller

    The only writer of the order ledger.
    """

    def __init__(
        self,
        products: ProductRepository,
        orders: OrderRepository,
        gateway: PayPalConnector,
        forwarder: FulfillmentForwarder,
    ):
        self.products = products
        self.orders = orders
        self.gateway = gateway
        self.forwarder = forwarder

    async def create_order(self, items: Any, customer: Any = None) -> str:
        """
        Price the cart, open a PayPal order and record it as pending

        Args:
            items: Raw cart lines ([{"id": ..., "quantity": ...}])
            customer: Optional buyer details

        Returns:
            PayPal order ID, which is also the local order ID

        Raises:
            ValidationError: malformed or empty cart
            AuthError / GatewayError: PayPal refused; nothing is stored
        """
        cart = parse_cart(items)
        if customer is None:
            customer = {}
        if not isinstance(customer, dict):
            raise ValidationError("customer must be an object")

        # prices are read now; a concurrent catalog update is not guarded against
        total = compute_total(cart, self.products.find_all())

        order_id = await self.gateway.create_order(total)

        order = Order(
            id=order_id,
            items=cart,
            total=total,
            status=OrderStatus.PENDING,
            customer=customer,
        )
        self.orders.append(order)

        logger.info(f"Order {order_id} created: {len(cart)} line(s), total {format_amount(total)}")
        return order_id

    async def capture_order(self, order_id: str) -> CaptureOutcome:
        """
        Capture the PayPal payment and settle the local order

        Returns:
            CaptureOutcome with PayPal's capture response. order and
            fulfillment stay None when the id is not in the ledger.

        Raises:
            AuthError / GatewayError: PayPal refused; the ledger is untouched
        """
        capture_result = await self.gateway.capture_order(order_id)

        order = self.orders.update_status(order_id, OrderStatus.PAID)
        if order is None:
            logger.warning(f"Order {order_id} captured at PayPal but not found in the ledger")
            return CaptureOutcome(result=capture_result)

        try:
            fulfillment = await self.forwarder.forward(order)
        except Exception as e:
            logger.exception(f"Unexpected error forwarding order {order_id}")
            fulfillment = FulfillmentResult.failed(str(e))

        return CaptureOutcome(result=capture_result, order=order, fulfillment=fulfillment)
