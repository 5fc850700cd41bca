"""Unit tests for the product catalog and order schema."""

import pytest
from pydantic import ValidationError

from storefront_shared.models.catalog import (
    PRODUCT_NAMES,
    get_display_name,
    is_known_product,
    line_item_name,
)
from storefront_shared.models.checkout import METADATA_VALUE_MAX_LENGTH, OrderRequest


class TestCatalog:
    """Test catalog lookups."""

    def test_contains_storefront_products(self):
        assert dict(PRODUCT_NAMES) == {
            "karma": "The Karma Tee",
            "buttercup": "The Buttercup",
            "zero-dark": "Zero Care - Dark",
            "zero-light": "Zero Care - Light",
            "boss": "The Boss Move",
        }

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            PRODUCT_NAMES["new"] = "New Thing"  # type: ignore[index]

    @pytest.mark.parametrize("product", sorted(PRODUCT_NAMES))
    def test_line_item_name_format(self, product: str):
        assert line_item_name(product, "XL") == f"{PRODUCT_NAMES[product]} - Size XL"

    def test_unknown_product_lookup_raises(self):
        assert is_known_product("hoodie") is False
        with pytest.raises(KeyError):
            get_display_name("hoodie")


class TestOrderRequest:
    """Test order request validation."""

    def test_valid_order(self):
        order = OrderRequest(product="karma", size="M", price=2500)

        assert order.product == "karma"
        assert order.size == "M"
        assert order.price == 2500

    def test_size_whitespace_stripped(self):
        order = OrderRequest(product="boss", size="  L ", price=3000)
        assert order.size == "L"

    def test_unknown_product_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderRequest(product="hoodie", size="M", price=2500)

        assert "Unknown product" in str(exc_info.value)

    @pytest.mark.parametrize("price", [0, -100])
    def test_non_positive_price_rejected(self, price: int):
        with pytest.raises(ValidationError):
            OrderRequest(product="karma", size="M", price=price)

    @pytest.mark.parametrize("price", ["2500", 25.5, True])
    def test_non_integer_price_rejected(self, price):
        with pytest.raises(ValidationError):
            OrderRequest(product="karma", size="M", price=price)

    def test_empty_size_rejected(self):
        with pytest.raises(ValidationError):
            OrderRequest(product="karma", size="   ", price=2500)

    def test_long_size_label_accepted(self):
        order = OrderRequest(product="karma", size="Extra Large Tall (EU 54)", price=2500)
        assert order.size == "Extra Large Tall (EU 54)"

    def test_size_at_metadata_limit_accepted(self):
        size = "X" * METADATA_VALUE_MAX_LENGTH
        assert OrderRequest(product="karma", size=size, price=2500).size == size

    def test_size_over_metadata_limit_rejected(self):
        with pytest.raises(ValidationError):
            OrderRequest(product="karma", size="X" * (METADATA_VALUE_MAX_LENGTH + 1), price=2500)
