"""Application service: Calculate Order Total use case.

Orchestrates cart validation and promo code evaluation and combines
them into one breakdown.  The two checks fail independently: an
unusable promo code only zeroes the discount, and a valid promo code
never makes an invalid cart valid.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping

from pricing.application.dto import AppliedPromoCode, OrderTotalResult
from pricing.application.settings import PricingSettings
from pricing.application.validate_cart import ValidateCartHandler
from pricing.application.validate_promo_code import ValidatePromoCodeHandler
from pricing.application.validators import validate_order_total_input
from pricing.domain.model.value_objects import ZERO, round2

logger = logging.getLogger(__name__)


class CalculateOrderTotalHandler:

    def __init__(
        self,
        cart_handler: ValidateCartHandler,
        promo_handler: ValidatePromoCodeHandler,
        settings: PricingSettings | None = None,
    ) -> None:
        self._cart_handler = cart_handler
        self._promo_handler = promo_handler
        self._settings = settings or PricingSettings()

    def handle(self, payload: Mapping[str, Any]) -> OrderTotalResult:
        """Compute the order breakdown for ``{"items": [...], "promoCode"?: str}``.

        Steps:
        1. Validate the request shape (raises InvalidOrderTotalDataError).
        2. Validate the cart; its subtotal covers valid lines only.
        3. Evaluate the promo code, if any, against that subtotal.
        4. Add shipping and tax, floor the total at zero.
        """
        validated = validate_order_total_input(payload)

        cart = self._cart_handler.validate_items(validated.items)
        subtotal = cart.summary.subtotal

        discount_amount = ZERO
        applied: AppliedPromoCode | None = None
        promo_message: str | None = None

        if validated.promo_code is not None:
            promo = self._promo_handler.evaluate(validated.promo_code, subtotal)
            if (
                promo.valid
                and promo.calculated_discount is not None
                and promo.discount_type is not None
                and promo.discount_value is not None
            ):
                discount_amount = round2(promo.calculated_discount)
                applied = AppliedPromoCode(
                    code=promo.code,
                    discount_type=promo.discount_type,
                    discount_value=promo.discount_value,
                    calculated_discount=discount_amount,
                )
            else:
                promo_message = promo.message

        shipping_cost = self._settings.shipping_cost
        # Tax base uses the already rounded discount.
        tax_amount = round2(self._settings.tax_rate * (subtotal - discount_amount))
        total = round2(max(Decimal(0), subtotal - discount_amount + shipping_cost + tax_amount))

        logger.info(
            "Order total computed: subtotal %s, discount %s, total %s %s (cart valid=%s)",
            subtotal, discount_amount, total, self._settings.currency, cart.valid,
        )

        return OrderTotalResult(
            valid=cart.valid,
            subtotal=subtotal,
            discount_amount=discount_amount,
            shipping_cost=shipping_cost,
            tax_amount=tax_amount,
            total=total,
            currency=self._settings.currency,
            item_count=cart.summary.item_count,
            validated_items=cart.items,
            applied_promo_code=applied,
            cart_errors=cart.errors,
            promo_code_message=promo_message,
        )
