"""
FastAPI dependency providers

Connectors and services are built per request from Settings. Tests swap
any of these through app.dependency_overrides.

Author: TM3
Date: 2026-10-19
"""
from fastapi import Depends

from storefront.connectors.dsers_connector import DSersConfig, DSersConnector
from storefront.connectors.paypal_connector import PayPalConfig, PayPalConnector
from storefront.core.config import Settings, get_settings
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.services.fulfillment_service import FulfillmentForwarder
from storefront.services.inventory_sync_service import InventorySyncService
from storefront.services.order_service import OrderService


def get_product_repository(settings: Settings = Depends(get_settings)) -> ProductRepository:
    return ProductRepository(settings.products_path)


def get_order_repository(settings: Settings = Depends(get_settings)) -> OrderRepository:
    return OrderRepository(settings.orders_path)


def get_paypal_connector(settings: Settings = Depends(get_settings)) -> PayPalConnector:
    return PayPalConnector(PayPalConfig.from_settings(settings))


def get_dsers_connector(settings: Settings = Depends(get_settings)) -> DSersConnector:
    return DSersConnector(DSersConfig.from_settings(settings))


def get_order_service(
    products: ProductRepository = Depends(get_product_repository),
    orders: OrderRepository = Depends(get_order_repository),
    gateway: PayPalConnector = Depends(get_paypal_connector),
    dsers: DSersConnector = Depends(get_dsers_connector),
) -> OrderService:
    return OrderService(products, orders, gateway, FulfillmentForwarder(dsers))


def get_inventory_sync_service(
    dsers: DSersConnector = Depends(get_dsers_connector),
    products: ProductRepository = Depends(get_product_repository),
) -> InventorySyncService:
    return InventorySyncService(dsers, products)
