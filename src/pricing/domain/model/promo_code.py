"""PromoCode aggregate and discount calculation.

A promo code is read-only here: eligibility is checked against a
snapshot of its usage counter and nothing is consumed.  Incrementing
``current_uses`` belongs to order placement, which has to do it with a
conditional update (increment only while ``current_uses < max_uses``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable

from pricing.domain.model.value_objects import round2


class DiscountType(Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"

    def calculate(
        self,
        discount_value: Decimal,
        order_total: Decimal | None,
        max_discount_amount: Decimal | None,
    ) -> Decimal | None:
        """Discount granted on *order_total*, or None if it cannot be known yet."""
        return _CALCULATORS[self](discount_value, order_total, max_discount_amount)


def _percentage_discount(
    discount_value: Decimal,
    order_total: Decimal | None,
    max_discount_amount: Decimal | None,
) -> Decimal | None:
    if order_total is None:
        return None
    amount = order_total * discount_value / Decimal(100)
    if max_discount_amount is not None and amount > max_discount_amount:
        amount = max_discount_amount
    if amount > order_total:
        amount = order_total
    return round2(amount)


def _fixed_amount_discount(
    discount_value: Decimal,
    order_total: Decimal | None,
    max_discount_amount: Decimal | None,
) -> Decimal:
    # max_discount_amount only bounds percentages
    amount = discount_value
    if order_total is not None and amount > order_total:
        amount = order_total
    return round2(amount)


_CALCULATORS: dict[
    DiscountType,
    Callable[[Decimal, Decimal | None, Decimal | None], Decimal | None],
] = {
    DiscountType.PERCENTAGE: _percentage_discount,
    DiscountType.FIXED_AMOUNT: _fixed_amount_discount,
}


def plain_number(value: Decimal) -> str:
    """Render an amount without trailing zeros: ``50.00`` -> ``50``."""
    return format(value.normalize(), "f")


@dataclass(frozen=True)
class PromoCode:
    code: str
    discount_type: DiscountType
    discount_value: Decimal
    valid_from: datetime
    valid_until: datetime | None = None
    is_active: bool = True
    min_order_amount: Decimal | None = None
    max_discount_amount: Decimal | None = None
    max_uses: int | None = None
    max_uses_per_user: int | None = None  # enforced at order placement
    current_uses: int = 0

    def ineligibility_reason(self, now: datetime, order_total: Decimal | None) -> str | None:
        """Return the first failed eligibility check's message, or None."""
        for check in ELIGIBILITY_CHECKS:
            reason = check(self, now, order_total)
            if reason is not None:
                return reason
        return None

    def discount_for(self, order_total: Decimal | None) -> Decimal | None:
        return self.discount_type.calculate(
            self.discount_value, order_total, self.max_discount_amount
        )


# ---------------------------------------------------------------------------
# Eligibility checks, in evaluation order.  First failure wins.
# ---------------------------------------------------------------------------

EligibilityCheck = Callable[[PromoCode, datetime, Decimal | None], str | None]


def _inactive(promo: PromoCode, now: datetime, order_total: Decimal | None) -> str | None:
    if not promo.is_active:
        return "Promo code is not active"
    return None


def _not_started(promo: PromoCode, now: datetime, order_total: Decimal | None) -> str | None:
    if now < promo.valid_from:
        return "Promo code is not yet valid"
    return None


def _expired(promo: PromoCode, now: datetime, order_total: Decimal | None) -> str | None:
    if promo.valid_until is not None and now > promo.valid_until:
        return "Promo code has expired"
    return None


def _exhausted(promo: PromoCode, now: datetime, order_total: Decimal | None) -> str | None:
    if promo.max_uses is not None and promo.current_uses >= promo.max_uses:
        return "Promo code usage limit reached"
    return None


def _below_minimum(promo: PromoCode, now: datetime, order_total: Decimal | None) -> str | None:
    # Without an amount the threshold cannot be checked, so it passes.
    if (
        promo.min_order_amount is not None
        and order_total is not None
        and order_total < promo.min_order_amount
    ):
        return (
            "Order total does not meet minimum amount of "
            f"{plain_number(promo.min_order_amount)}"
        )
    return None


ELIGIBILITY_CHECKS: tuple[EligibilityCheck, ...] = (
    _inactive,
    _not_started,
    _expired,
    _exhausted,
    _below_minimum,
)
