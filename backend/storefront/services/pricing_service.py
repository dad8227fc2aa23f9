"""
Pricing Service - order totals from cart lines and catalog prices

Author: TM3
Date: 2026-10-19
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from storefront.domain.order import CartItem
from storefront.domain.product import Product

CENTS = Decimal("0.01")


def compute_total(items: Iterable[CartItem], catalog: List[Product]) -> Decimal:
    """
    Sum price x quantity for every cart line whose product is in the catalog

    Lines pointing at unknown product ids are skipped, so a stale cart
    never blocks checkout. Quantities below one count as one unit. The
    result is not rounded; use format_amount for display and payment APIs.
    """
    prices = {product.id: product.price for product in catalog}
    total = Decimal("0")
    for item in items:
        price = prices.get(item.id)
        if price is None:
            continue
        total += price * item.effective_quantity
    return total


def format_amount(amount: Decimal) -> str:
    """Two-decimal string, e.g. Decimal('25.5') -> '25.50'"""
    return str(Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))
