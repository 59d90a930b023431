"""Pricing settings: flat shipping, flat tax rate and currency.

Passed explicitly to the order total use case so each caller (and
each test) decides its own values instead of sharing module state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from pricing.domain.exceptions import ValidationError
from pricing.domain.model.value_objects import DEFAULT_CURRENCY, ZERO, to_decimal


@dataclass(frozen=True)
class PricingSettings:
    shipping_cost: Decimal = ZERO
    tax_rate: Decimal = Decimal("0")
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.shipping_cost < 0:
            raise ValidationError("Shipping cost cannot be negative", "shipping_cost")
        if self.tax_rate < 0:
            raise ValidationError("Tax rate cannot be negative", "tax_rate")
        if not self.currency:
            raise ValidationError("Currency is required", "currency")

    @classmethod
    def from_env(cls) -> PricingSettings:
        """Build settings from ``PRICING_*`` environment variables."""
        return cls(
            shipping_cost=to_decimal(os.getenv("PRICING_SHIPPING_COST", "0")),
            tax_rate=to_decimal(os.getenv("PRICING_TAX_RATE", "0")),
            currency=os.getenv("PRICING_CURRENCY", DEFAULT_CURRENCY),
        )
