"""
Product Domain Model

Represents a catalog product as stored in products.json.
Normalization happens at validation time so every product handed to the
API or the pricing service carries the presentation fields the storefront
pages rely on.

Author: TM3
Date: 2026-10-19
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TITLE = "Untitled Product"
DEFAULT_DESCRIPTION = "No description available."
DEFAULT_SHIPPING_TIME = "7–15 days"
DEFAULT_RATING = 4.6
DEFAULT_IMAGE = "/img/placeholder.jpg"


def _safe_text(value: Any, fallback: str) -> str:
    if value is None:
        return fallback
    return str(value)


def _safe_number(value: Any, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    return number if math.isfinite(number) else fallback


def _clamp_rating(value: Any, fallback: float) -> float:
    return max(0.0, min(5.0, _safe_number(value, fallback)))


def parse_price(value: Any) -> Decimal:
    """
    Parse a catalog or supplier price

    Unlike the presentation fields there is no fallback: a product whose
    price cannot be read must not be sold, so this raises instead.

    Raises:
        ValueError: missing, boolean, non-numeric, non-finite or negative
    """
    if value is None or isinstance(value, bool):
        raise ValueError("price is required")
    try:
        # str() keeps 5.5 as Decimal('5.5') instead of the binary float expansion
        price = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"price {value!r} is not a number")
    if not price.is_finite():
        raise ValueError(f"price {value!r} is not finite")
    if price < 0:
        raise ValueError(f"price {value!r} is negative")
    return price


class Review(BaseModel):
    """Customer review shown on the product page"""

    name: str = "Anonymous"
    rating: float = 5
    comment: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v):
        return _safe_text(v, "Anonymous")

    @field_validator("comment", mode="before")
    @classmethod
    def _comment(cls, v):
        return _safe_text(v, "")

    @field_validator("rating", mode="before")
    @classmethod
    def _rating(cls, v):
        # falsy ratings (0, None, "") fall back to five stars
        return _clamp_rating(v or 5, 5)


class Product(BaseModel):
    """
    Product domain model - represents a product in the catalog

    Fields:
        id: Unique product identifier (also used by the cart)
        title: Display name
        price: Unit price, never negative
        image: Image URL
        description: Long description
        shipping_time: Delivery estimate (serialized as shippingTime)
        rating: Average rating, clamped to 0-5
        reviews: Customer reviews in display order
        inventory: Supplier stock level, written by the inventory sync

    Any other fields found in the catalog file are kept as extras so a
    sync rewrite does not drop them.
    """

    id: str = Field(..., description="Product ID")
    title: str = Field(DEFAULT_TITLE, description="Product title")
    price: Decimal = Field(..., description="Unit price", ge=0)
    image: str = Field(DEFAULT_IMAGE, description="Image URL")
    description: str = Field(DEFAULT_DESCRIPTION, description="Product description")
    shipping_time: str = Field(DEFAULT_SHIPPING_TIME, alias="shippingTime", description="Shipping estimate")
    rating: float = Field(DEFAULT_RATING, description="Average rating (0-5)")
    reviews: List[Review] = Field(default_factory=list, description="Customer reviews")
    inventory: Optional[int] = Field(None, description="Supplier stock level")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v):
        if v is None or v == "":
            raise ValueError("product id is required")
        return str(v)

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, v):
        return _safe_text(v, DEFAULT_TITLE)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, v):
        return _safe_text(v, DEFAULT_DESCRIPTION)

    @field_validator("shipping_time", mode="before")
    @classmethod
    def _shipping_time(cls, v):
        return _safe_text(v, DEFAULT_SHIPPING_TIME)

    @field_validator("image", mode="before")
    @classmethod
    def _image(cls, v):
        return v or DEFAULT_IMAGE

    @field_validator("rating", mode="before")
    @classmethod
    def _rating(cls, v):
        return _clamp_rating(v, DEFAULT_RATING)

    @field_validator("reviews", mode="before")
    @classmethod
    def _reviews(cls, v):
        if not isinstance(v, list):
            return []
        return [r for r in v if isinstance(r, dict)]

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, v):
        return parse_price(v)

    def to_dict(self) -> dict:
        """Serialize with the catalog's field names and price as a JSON number"""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["price"] = float(self.price)
        return data
