"""
Pytest fixtures and configuration for the storefront backend tests

Remote APIs are never contacted: PayPal and DSers are served by
httpx.MockTransport handlers defined here, and data files live in tmp_path.

Author: TM3
Date: 2026-10-19
"""
import json

import httpx
import pytest

from storefront.connectors.dsers_connector import DSersConfig, DSersConnector
from storefront.connectors.paypal_connector import PayPalConfig, PayPalConnector
from storefront.core.config import Settings
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository


class FakePayPal:
    """
    Minimal PayPal Orders v2 stand-in

    Records every request; status codes for each step can be changed per
    test (token_status, create_status, capture_status).
    """

    def __init__(self):
        self.requests = []
        self.token_status = 200
        self.create_status = 201
        self.capture_status = 201
        self.order_id = "5O190127TN364715T"
        self.capture_body = {"id": self.order_id, "status": "COMPLETED"}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/v1/oauth2/token":
            if self.token_status != 200:
                return httpx.Response(self.token_status, text='{"error":"invalid_client"}')
            return httpx.Response(200, json={"access_token": "A21AAF-token", "expires_in": 32400})

        if path == "/v2/checkout/orders":
            if self.create_status >= 400:
                return httpx.Response(self.create_status, text='{"name":"INVALID_REQUEST"}')
            return httpx.Response(self.create_status, json={"id": self.order_id, "status": "CREATED"})

        if path.endswith("/capture"):
            if self.capture_status >= 400:
                return httpx.Response(self.capture_status, text='{"name":"UNPROCESSABLE_ENTITY","details":[{"issue":"ORDER_ALREADY_CAPTURED"}]}')
            return httpx.Response(self.capture_status, json=self.capture_body)

        return httpx.Response(404, text="unexpected path")

    def calls_to(self, suffix: str) -> int:
        return sum(1 for r in self.requests if r.url.path.endswith(suffix))


class FakeDSers:
    """DSers stand-in; set fail=True to answer every request with 500"""

    def __init__(self):
        self.requests = []
        self.fail = False
        self.products = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            return httpx.Response(500, text="supplier outage")
        if request.url.path == "/createOrder":
            return httpx.Response(200, json={"status": "ok", "dsersOrderId": "D-1"})
        if request.url.path == "/products":
            return httpx.Response(200, json={"products": self.products})
        return httpx.Response(404, text="unexpected path")

    def sent_orders(self):
        return [json.loads(r.content) for r in self.requests if r.url.path == "/createOrder"]


@pytest.fixture
def sample_catalog():
    """Two products used across pricing and checkout tests"""
    return [
        {"id": "a", "title": "Desk Lamp", "price": 10.00},
        {"id": "b", "title": "Cable Organizer", "price": 5.50},
    ]


@pytest.fixture
def products_file(tmp_path, sample_catalog):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_catalog))
    return path


@pytest.fixture
def orders_file(tmp_path):
    path = tmp_path / "orders.json"
    path.write_text("[]")
    return path


@pytest.fixture
def product_repo(products_file):
    return ProductRepository(products_file)


@pytest.fixture
def order_repo(orders_file):
    return OrderRepository(orders_file)


@pytest.fixture
def fake_paypal():
    return FakePayPal()


@pytest.fixture
def fake_dsers():
    return FakeDSers()


@pytest.fixture
def paypal_connector(fake_paypal):
    config = PayPalConfig(client_id="client-id", client_secret="client-secret")
    return PayPalConnector(config, transport=httpx.MockTransport(fake_paypal.handler))


@pytest.fixture
def dsers_connector(fake_dsers):
    config = DSersConfig(api_key="key", api_secret="secret")
    return DSersConnector(config, transport=httpx.MockTransport(fake_dsers.handler))


@pytest.fixture
def unconfigured_dsers_connector(fake_dsers):
    return DSersConnector(DSersConfig(api_key="", api_secret=""), transport=httpx.MockTransport(fake_dsers.handler))


@pytest.fixture
def test_settings(tmp_path, products_file, orders_file):
    return Settings(
        DATA_DIR=tmp_path,
        PRODUCTS_FILE=products_file,
        ORDERS_FILE=orders_file,
        PUBLIC_DIR=tmp_path / "public",
        PAYPAL_CLIENT_ID="client-id",
        PAYPAL_CLIENT_SECRET="client-secret",
        DSERS_API_KEY="key",
        DSERS_API_SECRET="secret",
        SYNC_API_KEY="sync-secret",
    )
