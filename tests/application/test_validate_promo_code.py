"""Integration tests for the ValidatePromoCode use case."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from pricing.application.dto import PromoValidationResult
from pricing.application.validate_promo_code import ValidatePromoCodeHandler
from pricing.domain.exceptions import InvalidPromoCodeDataError
from pricing.domain.model.promo_code import DiscountType, PromoCode
from tests.fakes import FakePromoCodeRepository, fixed_clock, make_promo


def _handler(*promos: PromoCode) -> ValidatePromoCodeHandler:
    return ValidatePromoCodeHandler(FakePromoCodeRepository(list(promos)), clock=fixed_clock)


class TestValidatePromoCodeSuccess:

    def test_percentage_with_amount(self):
        result = _handler(make_promo()).handle({"code": "SUMMER20", "orderTotal": 100})
        assert result.valid is True
        assert result.code == "SUMMER20"
        assert result.discount_type == DiscountType.PERCENTAGE
        assert result.discount_value == Decimal("20")
        assert result.calculated_discount == Decimal("20.00")
        assert result.message == "Promo code applied"

    def test_lookup_is_case_insensitive(self):
        result = _handler(make_promo()).handle({"code": "  summer20  ", "orderTotal": 100})
        assert result.valid is True
        assert result.code == "SUMMER20"

    def test_percentage_without_amount(self):
        result = _handler(make_promo()).handle({"code": "SUMMER20"})
        assert result.valid is True
        assert result.calculated_discount is None

    def test_fixed_amount_without_amount(self):
        promo = make_promo("FIJO50", DiscountType.FIXED_AMOUNT, "50")
        result = _handler(promo).handle({"code": "FIJO50"})
        assert result.calculated_discount == Decimal("50.00")


class TestValidatePromoCodeFailures:

    def test_not_found_echoes_normalized_code(self):
        result = _handler().handle({"code": "nope"})
        assert result.valid is False
        assert result.code == "NOPE"
        assert result.message == "Promo code not found"
        assert result.discount_type is None
        assert result.calculated_discount is None

    def test_expired(self):
        promo = make_promo("EXPIRED20", valid_until=datetime(2024, 12, 31, tzinfo=timezone.utc))
        result = _handler(promo).handle({"code": "expired20", "orderTotal": 100})
        assert result.valid is False
        assert result.message == "Promo code has expired"

    def test_below_minimum(self):
        promo = make_promo(min_order_amount=Decimal("49.50"))
        result = _handler(promo).handle({"code": "SUMMER20", "orderTotal": 20})
        assert result.message == "Order total does not meet minimum amount of 49.5"

    def test_does_not_consume_usage(self):
        promo = make_promo(max_uses=1, current_uses=0)
        handler = _handler(promo)
        first = handler.handle({"code": "SUMMER20", "orderTotal": 100})
        second = handler.handle({"code": "SUMMER20", "orderTotal": 100})
        assert first == second
        assert promo.current_uses == 0

    def test_uses_injected_clock(self):
        promo = make_promo(valid_from=datetime(2025, 6, 16, tzinfo=timezone.utc))
        result = _handler(promo).handle({"code": "SUMMER20"})
        assert result.message == "Promo code is not yet valid"


class TestValidatePromoCodeInput:

    def test_malformed_request_raises(self):
        with pytest.raises(InvalidPromoCodeDataError):
            _handler().handle({"code": "X", "orderTotal": -1})


class TestValidatePromoCodeSerialization:

    def test_success_shape(self):
        data = _handler(make_promo()).handle({"code": "SUMMER20"}).to_dict()
        assert data == {
            "valid": True,
            "code": "SUMMER20",
            "discountType": "PERCENTAGE",
            "discountValue": 20.0,
            "calculatedDiscount": None,
            "message": "Promo code applied",
        }

    def test_failure_shape(self):
        data = _handler().handle({"code": "nope"}).to_dict()
        assert data == {"valid": False, "code": "NOPE", "message": "Promo code not found"}

    def test_success_without_discount_details(self):
        result = PromoValidationResult(valid=True, code="SUMMER20", message="Promo code applied")
        assert result.to_dict() == {
            "valid": True,
            "code": "SUMMER20",
            "message": "Promo code applied",
        }
