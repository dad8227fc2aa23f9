"""
Inventory Sync Service - pulls supplier stock and prices into the catalog

Meant to run periodically (cron script or POST /api/sync/inventory). Only
inventory and price of products already in the catalog are touched;
supplier products with no local match are ignored.

Author: TM3
Date: 2026-10-19
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from storefront.connectors.dsers_connector import DSersConnector
from storefront.core.exceptions import ForwardingError
from storefront.domain.product import parse_price
from storefront.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass
class InventorySyncResult:
    success: bool
    message: str
    products_updated: int = 0
    errors: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0


class InventorySyncService:

    def __init__(self, connector: DSersConnector, products: ProductRepository):
        self.connector = connector
        self.products = products

    async def sync(self) -> InventorySyncResult:
        start = time.time()

        if not self.connector.configured:
            logger.warning("DSers credentials are missing. Inventory sync skipped.")
            return InventorySyncResult(success=False, message="Skipped: DSers credentials missing")

        try:
            remote_products = await self.connector.fetch_products()
        except ForwardingError as e:
            logger.error(f"Inventory sync failed: {e}")
            return InventorySyncResult(
                success=False,
                message="Inventory sync failed",
                errors=[str(e)],
                duration_seconds=round(time.time() - start, 2),
            )

        updates: Dict[str, Dict[str, Any]] = {}
        errors = []
        for remote in remote_products:
            if not isinstance(remote, dict) or remote.get("id") is None:
                errors.append(f"Ignoring supplier entry without id: {remote!r}")
                continue
            change = {}
            if "inventory" in remote:
                change["inventory"] = remote["inventory"]
            if "price" in remote:
                try:
                    parse_price(remote["price"])
                    change["price"] = remote["price"]
                except ValueError as e:
                    errors.append(f"Ignoring price for {remote['id']}: {e}")
            if change:
                updates[str(remote["id"])] = change

        updated = self.products.update_stock(updates)
        duration = round(time.time() - start, 2)

        logger.info(f"Inventory sync: {updated} product(s) updated from {len(remote_products)} supplier entries in {duration}s")
        return InventorySyncResult(
            success=True,
            message=f"Updated {updated} product(s)",
            products_updated=updated,
            errors=errors,
            duration_seconds=duration,
        )
