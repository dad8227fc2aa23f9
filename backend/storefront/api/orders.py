"""
Orders API Endpoints
Checkout: create a PayPal-backed order, then capture it after approval

Both endpoints answer failures with 400 {"error": message}, the contract
the checkout page relies on.

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.api.dependencies import get_order_service
from storefront.core.exceptions import StorefrontError
from storefront.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter()


class CreateOrderRequest(BaseModel):
    """Checkout body; the cart and customer are validated by OrderService"""
    items: Any = None
    customer: Any = None


def _error(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


@router.post("", status_code=201)
async def create_order(payload: CreateOrderRequest, service: OrderService = Depends(get_order_service)):
    """
    Create an order from the cart

    Body: {"items": [{"id": "...", "quantity": 1}], "customer": {...}}
    Returns: {"orderId": "<PayPal order id>"}
    """
    try:
        order_id = await service.create_order(payload.items, payload.customer)
    except StorefrontError as e:
        logger.warning(f"Order creation rejected: {e}")
        return _error(str(e))
    except Exception as e:
        logger.exception("Order creation failed")
        return _error(str(e))

    return JSONResponse(status_code=201, content={"orderId": order_id})


@router.post("/{order_id}/capture")
async def capture_order(order_id: str, service: OrderService = Depends(get_order_service)):
    """
    Capture an approved order

    Returns: {"status": "captured", "result": <PayPal capture response>}.
    Fulfillment problems are logged only and never change this response.
    """
    try:
        outcome = await service.capture_order(order_id)
    except StorefrontError as e:
        logger.warning(f"Capture of order {order_id} rejected: {e}")
        return _error(str(e))
    except Exception as e:
        logger.exception(f"Capture of order {order_id} failed")
        return _error(str(e))

    return {"status": "captured", "result": outcome.result}
