"""
Repository Layer - Data Access

Repositories wrap the JSON files under DATA_DIR and return domain models.

Author: TM3
Date: 2026-10-19
"""
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = [
    'ProductRepository',
    'OrderRepository',
]
