"""
Domain Layer - Business Entities

Pydantic models for products, orders and fulfillment outcomes.

Author: TM3
Date: 2026-10-19
"""
from storefront.domain.product import Product, Review
from storefront.domain.order import CartItem, Order, OrderStatus
from storefront.domain.fulfillment import FulfillmentResult, FulfillmentStatus

__all__ = [
    'Product',
    'Review',
    'CartItem',
    'Order',
    'OrderStatus',
    'FulfillmentResult',
    'FulfillmentStatus',
]
