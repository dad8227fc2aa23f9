"""
Unit tests for ProductRepository and product normalization

Author: TM3
Date: 2026-10-19
"""
import json
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from storefront.domain.product import (
    DEFAULT_DESCRIPTION,
    DEFAULT_IMAGE,
    DEFAULT_RATING,
    DEFAULT_SHIPPING_TIME,
    DEFAULT_TITLE,
    Product,
    parse_price,
)
from storefront.repositories.product_repository import ProductRepository


class TestProductNormalization:
    """Test the defaults applied when catalog entries are incomplete"""

    def test_bare_product_gets_presentation_defaults(self):
        product = Product.model_validate({"id": "p1", "price": 3})

        assert product.title == DEFAULT_TITLE
        assert product.description == DEFAULT_DESCRIPTION
        assert product.shipping_time == DEFAULT_SHIPPING_TIME
        assert product.rating == DEFAULT_RATING
        assert product.image == DEFAULT_IMAGE
        assert product.reviews == []

    def test_rating_is_clamped(self):
        assert Product.model_validate({"id": "p", "price": 1, "rating": 9}).rating == 5
        assert Product.model_validate({"id": "p", "price": 1, "rating": -2}).rating == 0
        assert Product.model_validate({"id": "p", "price": 1, "rating": "n/a"}).rating == DEFAULT_RATING

    def test_reviews_not_a_list_become_empty(self):
        assert Product.model_validate({"id": "p", "price": 1, "reviews": "great"}).reviews == []

    def test_review_defaults(self):
        product = Product.model_validate({"id": "p", "price": 1, "reviews": [{"comment": "ok"}, "junk"]})

        assert len(product.reviews) == 1
        assert product.reviews[0].name == "Anonymous"
        assert product.reviews[0].rating == 5

    def test_price_parsing(self):
        assert Product.model_validate({"id": "p", "price": 5.5}).price == Decimal("5.5")
        assert Product.model_validate({"id": "p", "price": "12.40"}).price == Decimal("12.40")
        assert Product.model_validate({"id": "p", "price": 0}).price == Decimal("0")

    @pytest.mark.parametrize("raw", [
        {"id": "p"},
        {"id": "p", "price": None},
        {"id": "p", "price": True},
        {"id": "p", "price": "19,99"},
        {"id": "p", "price": "abc"},
        {"id": "p", "price": "NaN"},
        {"id": "p", "price": "Infinity"},
        {"id": "p", "price": -1},
    ])
    def test_unreadable_price_is_rejected(self, raw):
        """Test a product never defaults to a zero price"""
        with pytest.raises(PydanticValidationError):
            Product.model_validate(raw)

    def test_parse_price_raises_value_error(self):
        assert parse_price("3.10") == Decimal("3.10")
        with pytest.raises(ValueError):
            parse_price("19,99")

    def test_to_dict_uses_catalog_field_names(self):
        data = Product.model_validate({"id": "p", "price": 2.5, "shippingTime": "3 days", "color": "red"}).to_dict()

        assert data["shippingTime"] == "3 days"
        assert "shipping_time" not in data
        assert data["price"] == 2.5
        assert data["color"] == "red"


class TestProductRepository:
    """Test ProductRepository methods"""

    def test_find_all_returns_products(self, product_repo):
        products = product_repo.find_all()

        assert [p.id for p in products] == ["a", "b"]
        assert all(isinstance(p, Product) for p in products)

    def test_find_by_id(self, product_repo):
        assert product_repo.find_by_id("b").price == Decimal("5.5")
        assert product_repo.find_by_id("missing") is None

    def test_missing_file_is_empty_catalog(self, tmp_path):
        assert ProductRepository(tmp_path / "nope.json").find_all() == []

    def test_invalid_entries_are_skipped(self, tmp_path, caplog):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([
            {"id": "ok", "price": 1},
            {"title": "no id"},
            {"id": "neg", "price": -4},
            "not an object",
        ]))

        products = ProductRepository(path).find_all()

        assert [p.id for p in products] == ["ok"]
        assert "Skipping" in caplog.text

    def test_unpriced_products_are_excluded(self, tmp_path, caplog):
        """Test products without a readable price never reach the catalog"""
        path = tmp_path / "products.json"
        path.write_text(json.dumps([
            {"id": "a", "price": "19,99"},
            {"id": "b"},
            {"id": "c", "price": None},
            {"id": "d", "price": "4.20"},
        ]))

        products = ProductRepository(path).find_all()

        assert [p.id for p in products] == ["d"]
        assert "Skipping invalid product" in caplog.text

    def test_non_array_file_raises(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('{"id": "a"}')

        with pytest.raises(ValueError):
            ProductRepository(path).find_all()

    def test_update_stock_returns_count(self, product_repo):
        assert product_repo.update_stock({"a": {"inventory": 3}, "x": {"inventory": 1}}) == 1
        assert product_repo.find_by_id("a").inventory == 3
