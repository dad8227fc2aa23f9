"""
Sync API - scheduled supplier synchronization
Designed to be called by cron-job.org or similar services

Endpoints:
- POST /api/sync/inventory - Pull stock and prices from DSers (requires API key)

Security:
- Requires X-Sync-Key header matching SYNC_API_KEY when that is configured

Author: TM3
Date: 2026-10-19
"""
import hmac
import logging
from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, Header, HTTPException
from pydantic import BaseModel

from storefront.api.dependencies import get_inventory_sync_service
from storefront.core.config import Settings, get_settings
from storefront.services.inventory_sync_service import InventorySyncService

logger = logging.getLogger(__name__)
router = APIRouter()


async def verify_sync_key(
    x_sync_key: str = Header(None, alias="X-Sync-Key"),
    settings: Settings = Depends(get_settings),
):
    """
    Verify the sync API key from X-Sync-Key header.

    If SYNC_API_KEY is not configured, allows all requests.
    """
    if not settings.SYNC_API_KEY:
        logger.warning("SYNC_API_KEY not configured - sync endpoints are unprotected!")
        return

    if not x_sync_key:
        logger.warning("Sync request without X-Sync-Key header")
        raise HTTPException(status_code=401, detail="Missing X-Sync-Key header. Authentication required.")

    if not hmac.compare_digest(x_sync_key.encode(), settings.SYNC_API_KEY.encode()):
        logger.warning("Invalid sync key attempt")
        raise HTTPException(status_code=401, detail="Invalid API key")


class InventorySyncResponse(BaseModel):
    """Response model for inventory sync"""
    success: bool
    message: str
    products_updated: int
    errors: List[str]
    duration_seconds: float


@router.post("/inventory", response_model=InventorySyncResponse, dependencies=[Depends(verify_sync_key)])
async def sync_inventory(service: InventorySyncService = Depends(get_inventory_sync_service)):
    """Sync supplier inventory and pricing into the catalog"""
    result = await service.sync()
    return InventorySyncResponse(**asdict(result))
