"""Tests for request shape validation."""

from decimal import Decimal

import pytest

from pricing.application.validators import (
    validate_cart_input,
    validate_order_total_input,
    validate_promo_code_input,
)
from pricing.domain.exceptions import (
    InvalidCartDataError,
    InvalidOrderTotalDataError,
    InvalidPromoCodeDataError,
)
from pricing.domain.model.cart import LineItemRequest
from tests.fakes import MUG_ID, SHIRT_ID


def _item(**overrides):
    item = {"productId": MUG_ID, "quantity": 1}
    item.update(overrides)
    return item


class TestCartInput:

    def test_valid_items(self):
        validated = validate_cart_input(
            {"items": [_item(), _item(productId=SHIRT_ID, quantity=2, size="  M ")]}
        )
        assert validated.items == (
            LineItemRequest(MUG_ID, 1, None),
            LineItemRequest(SHIRT_ID, 2, "M"),
        )

    def test_null_size_is_absent(self):
        validated = validate_cart_input({"items": [_item(size=None)]})
        assert validated.items[0].size is None

    @pytest.mark.parametrize("items", [None, "abc", {}])
    def test_items_must_be_a_list(self, items):
        with pytest.raises(InvalidCartDataError) as exc_info:
            validate_cart_input({"items": items})
        assert exc_info.value.field == "items"

    def test_empty_items_rejected(self):
        with pytest.raises(InvalidCartDataError, match="cannot be empty"):
            validate_cart_input({"items": []})

    def test_too_many_items_rejected(self):
        with pytest.raises(InvalidCartDataError, match="cannot exceed 50"):
            validate_cart_input({"items": [_item()] * 51})

    def test_fifty_items_accepted(self):
        assert len(validate_cart_input({"items": [_item()] * 50}).items) == 50

    def test_bad_uuid_names_the_field(self):
        with pytest.raises(InvalidCartDataError, match="Invalid ID format") as exc_info:
            validate_cart_input({"items": [_item(), _item(), _item(productId="not-a-uuid")]})
        assert exc_info.value.field == "items[2].productId"

    def test_missing_product_id(self):
        with pytest.raises(InvalidCartDataError, match="ID is required"):
            validate_cart_input({"items": [{"quantity": 1}]})

    @pytest.mark.parametrize(
        "quantity, message",
        [
            (0, "must be at least 1"),
            (100, "cannot exceed 99"),
            (1.5, "must be an integer"),
            ("2", "must be a number"),
            (True, "must be a number"),
            (None, "must be a number"),
        ],
    )
    def test_bad_quantity(self, quantity, message):
        with pytest.raises(InvalidCartDataError, match=message) as exc_info:
            validate_cart_input({"items": [_item(quantity=quantity)]})
        assert exc_info.value.field == "items[0].quantity"

    def test_integral_float_quantity_accepted(self):
        assert validate_cart_input({"items": [_item(quantity=2.0)]}).items[0].quantity == 2

    @pytest.mark.parametrize(
        "size, message",
        [("   ", "cannot be empty"), ("X" * 21, "cannot exceed 20"), (42, "must be a string")],
    )
    def test_bad_size(self, size, message):
        with pytest.raises(InvalidCartDataError, match=message) as exc_info:
            validate_cart_input({"items": [_item(size=size)]})
        assert exc_info.value.field == "items[0].size"

    def test_error_code(self):
        with pytest.raises(InvalidCartDataError) as exc_info:
            validate_cart_input({"items": []})
        assert exc_info.value.code == "INVALID_CART_DATA"


class TestPromoCodeInput:

    def test_normalizes_code(self):
        validated = validate_promo_code_input({"code": "  summer20 "})
        assert validated.code == "SUMMER20"
        assert validated.order_total is None

    def test_order_total_as_decimal(self):
        validated = validate_promo_code_input({"code": "X", "orderTotal": 59.98})
        assert validated.order_total == Decimal("59.98")

    def test_zero_order_total_accepted(self):
        assert validate_promo_code_input({"code": "X", "orderTotal": 0}).order_total == 0

    @pytest.mark.parametrize("code", [None, 123, ""])
    def test_code_required(self, code):
        with pytest.raises(InvalidPromoCodeDataError) as exc_info:
            validate_promo_code_input({"code": code})
        assert exc_info.value.field == "code"

    def test_whitespace_code_rejected(self):
        with pytest.raises(InvalidPromoCodeDataError, match="code cannot be empty") as exc_info:
            validate_promo_code_input({"code": "   "})
        assert exc_info.value.field == "code"

    def test_code_too_long(self):
        with pytest.raises(InvalidPromoCodeDataError, match="cannot exceed 50"):
            validate_promo_code_input({"code": "A" * 51})

    @pytest.mark.parametrize("total", [float("nan"), float("inf"), "100", True])
    def test_order_total_must_be_a_number(self, total):
        with pytest.raises(InvalidPromoCodeDataError, match="must be a number"):
            validate_promo_code_input({"code": "X", "orderTotal": total})

    def test_negative_order_total(self):
        with pytest.raises(InvalidPromoCodeDataError, match="at least 0") as exc_info:
            validate_promo_code_input({"code": "X", "orderTotal": -0.01})
        assert exc_info.value.field == "orderTotal"


class TestOrderTotalInput:

    def test_items_and_promo(self):
        validated = validate_order_total_input({"items": [_item()], "promoCode": " save10 "})
        assert validated.items == (LineItemRequest(MUG_ID, 1),)
        assert validated.promo_code == "SAVE10"

    def test_promo_optional(self):
        assert validate_order_total_input({"items": [_item()]}).promo_code is None

    def test_item_errors_use_order_total_error(self):
        with pytest.raises(InvalidOrderTotalDataError) as exc_info:
            validate_order_total_input({"items": [_item(quantity=0)]})
        assert exc_info.value.field == "items[0].quantity"
        assert exc_info.value.code == "INVALID_ORDER_TOTAL_DATA"

    @pytest.mark.parametrize(
        "promo, message",
        [("", "cannot be empty"), ("A" * 51, "cannot exceed 50"), (5, "must be a string")],
    )
    def test_bad_promo_code(self, promo, message):
        with pytest.raises(InvalidOrderTotalDataError, match=message) as exc_info:
            validate_order_total_input({"items": [_item()], "promoCode": promo})
        assert exc_info.value.field == "promoCode"
