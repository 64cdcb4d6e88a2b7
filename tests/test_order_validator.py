"""
Unit tests for order request validation.
"""
from typing import Any

import pytest

from storefront.schemas.order import OrderCreateRequest
from storefront.services.exceptions import ValidationError
from storefront.services.order_validator import validate_order_request


def make_request(**overrides: Any) -> OrderCreateRequest:
    data: dict[str, Any] = {
        "customerIdentifier": "c1",
        "customerName": "Alice",
        "items": [
            {"product_id": 1, "quantity": 2, "name": "Widget", "price_at_order": 5},
        ],
    }
    data.update(overrides)
    return OrderCreateRequest.model_validate(data)


class TestOrderValidator:
    """Test suite for validate_order_request."""

    @pytest.mark.unit
    def test_valid_request(self) -> None:
        request = make_request()

        result = validate_order_request(request)

        assert result.ok
        assert result.value is request

    @pytest.mark.unit
    @pytest.mark.parametrize("items", [[], None])
    def test_empty_items(self, items: Any) -> None:
        result = validate_order_request(make_request(items=items))

        assert isinstance(result.error, ValidationError)
        assert "at least one item" in result.error.message
        assert result.error.status_code == 400

    @pytest.mark.unit
    @pytest.mark.parametrize("identifier", ["", "   ", None])
    def test_blank_customer_identifier(self, identifier: Any) -> None:
        result = validate_order_request(make_request(customerIdentifier=identifier))

        assert isinstance(result.error, ValidationError)
        assert "customerIdentifier" in result.error.message

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "\t", None])
    def test_blank_customer_name(self, name: Any) -> None:
        result = validate_order_request(make_request(customerName=name))

        assert isinstance(result.error, ValidationError)
        assert "customerName" in result.error.message

    @pytest.mark.unit
    def test_items_checked_before_customer(self) -> None:
        result = validate_order_request(make_request(items=[], customerIdentifier=""))

        assert "at least one item" in result.error.message

    @pytest.mark.unit
    @pytest.mark.parametrize("missing", ["product_id", "quantity", "name", "price_at_order"])
    def test_item_missing_required_field(self, missing: str) -> None:
        item = {"product_id": 1, "quantity": 2, "name": "Widget", "price_at_order": 5}
        del item[missing]

        result = validate_order_request(make_request(items=[item]))

        assert isinstance(result.error, ValidationError)
        assert "#1" in result.error.message

    @pytest.mark.unit
    def test_item_blank_name(self) -> None:
        item = {"product_id": 1, "quantity": 2, "name": "  ", "price_at_order": 5}

        result = validate_order_request(make_request(items=[item]))

        assert isinstance(result.error, ValidationError)

    @pytest.mark.unit
    @pytest.mark.parametrize("quantity", [0, -3])
    def test_item_non_positive_quantity(self, quantity: int) -> None:
        item = {"product_id": 1, "quantity": quantity, "name": "Widget", "price_at_order": 5}

        result = validate_order_request(make_request(items=[item]))

        assert isinstance(result.error, ValidationError)
        assert "greater than zero" in result.error.message

    @pytest.mark.unit
    def test_reports_only_first_invalid_item(self) -> None:
        items = [
            {"product_id": 1, "quantity": 1, "name": "Widget", "price_at_order": 5},
            {"product_id": 2, "quantity": 0, "name": "Gadget", "price_at_order": 5},
            {"product_id": 3, "name": "Gizmo", "price_at_order": 5},
        ]

        result = validate_order_request(make_request(items=items))

        assert "#2" in result.error.message
        assert "#3" not in result.error.message

    @pytest.mark.unit
    def test_image_url_is_optional(self) -> None:
        item = {"product_id": 1, "quantity": 1, "name": "Widget", "price_at_order": 5, "image_url": None}

        assert validate_order_request(make_request(items=[item])).ok
