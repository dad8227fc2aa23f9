"""
Product Repository - Data Access Layer for the catalog

Reads products.json on every call; the file is owned by whoever edits the
catalog and by the inventory sync, never by the checkout flow.

Author: TM3
Date: 2026-10-19
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from storefront.domain.product import Product
from storefront.repositories.json_file import lock_for, read_json_list, write_json_list

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Repository for Product data access

    Returns normalized Product domain models. Entries that cannot be
    normalized (no id, negative price) are left out with a warning.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def find_all(self) -> List[Product]:
        """
        Load the whole catalog

        Returns:
            Products in file order
        """
        products = []
        for raw in read_json_list(self.path):
            if not isinstance(raw, dict):
                logger.warning(f"Skipping non-object catalog entry in {self.path}: {raw!r}")
                continue
            try:
                products.append(Product.model_validate(raw))
            except PydanticValidationError as e:
                logger.warning(f"Skipping invalid product {raw.get('id')!r}: {e.error_count()} error(s)")
        return products

    def find_by_id(self, product_id: str) -> Optional[Product]:
        for product in self.find_all():
            if product.id == product_id:
                return product
        return None

    def update_stock(self, updates: Dict[str, Dict[str, Any]]) -> int:
        """
        Overwrite inventory and price on the raw catalog entries

        Works on the stored records rather than normalized models so fields
        the sync does not own are written back untouched.

        Args:
            updates: product id -> {"inventory": ..., "price": ...}

        Returns:
            Number of catalog entries changed (file untouched when 0)
        """
        with lock_for(self.path):
            records = read_json_list(self.path)
            updated = 0
            for record in records:
                if not isinstance(record, dict):
                    continue
                change = updates.get(str(record.get("id")))
                if change is None:
                    continue
                for field in ("inventory", "price"):
                    if field in change:
                        record[field] = change[field]
                updated += 1

            if updated:
                write_json_list(self.path, records)
            return updated
