"""
Order Domain Models

An Order is the server-side record of a checkout attempt. Its id is the
order id issued by PayPal, its total is fixed at creation time and its
status only ever moves from pending to paid.

Author: TM3
Date: 2026-10-19
"""
from enum import Enum
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class CartItem(BaseModel):
    """
    Cart line sent by the browser

    quantity is kept as sent; effective_quantity applies the checkout rule
    that a missing or non-positive quantity counts as one unit.
    """

    id: str = Field(..., description="Product ID")
    quantity: Optional[int] = Field(None, description="Units requested")

    model_config = ConfigDict(extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if v is None or v == "" or isinstance(v, (dict, list, bool)):
            raise ValueError("item id is required")
        return str(v)

    @property
    def effective_quantity(self) -> int:
        if not self.quantity or self.quantity < 1:
            return 1
        return self.quantity


class Order(BaseModel):
    """
    Order domain model - one entry of orders.json

    Fields:
        id: PayPal order ID
        items: Cart lines as submitted
        total: Amount charged, computed once at creation
        status: pending until captured, then paid
        customer: Free-form buyer details (address, contact)
    """

    id: str = Field(..., description="PayPal order ID")
    items: List[CartItem] = Field(default_factory=list, description="Ordered items")
    total: Decimal = Field(..., description="Order total", ge=0)
    status: OrderStatus = Field(OrderStatus.PENDING, description="Order status")
    customer: Dict[str, Any] = Field(default_factory=dict, description="Customer details")

    model_config = ConfigDict(extra="allow")

    @field_validator("total", mode="before")
    @classmethod
    def _total(cls, v):
        # JSON numbers come back as floats; go through str() to keep 25.5 exact
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dict (Decimal total as float, status as string)"""
        data = self.model_dump(mode="json", exclude_none=True)
        data["total"] = float(self.total)
        return data
