"""
Unit tests for DSersConnector

Author: TM3
Date: 2026-10-19
"""
import httpx
import pytest

from storefront.connectors.dsers_connector import DSersConfig, DSersConnector
from storefront.core.exceptions import ForwardingError


class TestDSersConnector:

    def test_configured_requires_key_and_secret(self):
        assert DSersConnector(DSersConfig("k", "s")).configured
        assert not DSersConnector(DSersConfig("k", "")).configured
        assert not DSersConnector(DSersConfig("", "s")).configured

    @pytest.mark.asyncio
    async def test_create_order_posts_payload(self, dsers_connector, fake_dsers):
        response = await dsers_connector.create_order({"id": "X1", "total": 3.5})

        assert response["dsersOrderId"] == "D-1"
        assert fake_dsers.sent_orders() == [{"id": "X1", "total": 3.5}]
        assert fake_dsers.requests[0].method == "POST"

    @pytest.mark.asyncio
    async def test_create_order_failure(self, dsers_connector, fake_dsers):
        fake_dsers.fail = True

        with pytest.raises(ForwardingError):
            await dsers_connector.create_order({"id": "X1"})

    @pytest.mark.asyncio
    async def test_fetch_products(self, dsers_connector, fake_dsers):
        fake_dsers.products = [{"id": "a", "inventory": 9, "price": 4.2}]

        products = await dsers_connector.fetch_products()

        assert products == [{"id": "a", "inventory": 9, "price": 4.2}]
        assert fake_dsers.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_fetch_products_requires_list(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"items": []}))
        connector = DSersConnector(DSersConfig("k", "s"), transport=transport)

        with pytest.raises(ForwardingError):
            await connector.fetch_products()

    @pytest.mark.asyncio
    async def test_invalid_json_becomes_forwarding_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>maintenance</html>"))
        connector = DSersConnector(DSersConfig("k", "s"), transport=transport)

        with pytest.raises(ForwardingError):
            await connector.create_order({"id": "X1"})
