#!/usr/bin/env python3
"""
DSers Inventory Sync - cron entry point
Pulls supplier stock levels and prices into data/products.json

Usage (crontab, every 6 hours):
    0 */6 * * * cd /srv/storefront/backend && python scripts/sync_inventory.py

Failures are logged; the script still exits 0 so cron does not spam mail.

Author: TM3
Date: 2026-10-19
"""
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
load_dotenv(Path(__file__).resolve().parent.parent / '.env')

from storefront.connectors.dsers_connector import DSersConfig, DSersConnector
from storefront.core.config import get_settings
from storefront.repositories.product_repository import ProductRepository
from storefront.services.inventory_sync_service import InventorySyncService

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def run():
    settings = get_settings()
    service = InventorySyncService(
        DSersConnector(DSersConfig.from_settings(settings)),
        ProductRepository(settings.products_path),
    )

    logger.info("Starting inventory sync...")
    result = await service.sync()
    for error in result.errors:
        logger.warning(error)
    logger.info(f"Inventory sync completed: {result.message}")
    return result


def main():
    try:
        asyncio.run(run())
    except Exception:
        logger.exception("Inventory sync crashed")


if __name__ == "__main__":
    main()
