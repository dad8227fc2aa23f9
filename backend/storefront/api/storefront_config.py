"""
Public checkout configuration

The checkout page needs the PayPal client id to load the PayPal SDK.
Only values that are safe to expose to browsers are returned here.

Author: TM3
Date: 2026-10-19
"""
from fastapi import APIRouter, Depends

from storefront.core.config import Settings, get_settings

router = APIRouter()


@router.get("")
async def get_public_config(settings: Settings = Depends(get_settings)):
    return {
        "paypalClientId": settings.PAYPAL_CLIENT_ID,
        "currency": settings.PAYPAL_CURRENCY,
        "environment": settings.PAYPAL_ENVIRONMENT,
    }
