"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from pricing.application.calculate_order_total import CalculateOrderTotalHandler
from pricing.application.settings import PricingSettings
from pricing.application.validate_cart import ValidateCartHandler
from pricing.application.validate_promo_code import ValidatePromoCodeHandler
from pricing.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pricing.infrastructure.persistence.json_promo_code_repository import (
    JsonPromoCodeRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.getenv("PRICING_DATA_DIR", str(_DEFAULT_DATA_DIR)))


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def promo_code_repository() -> JsonPromoCodeRepository:
    return JsonPromoCodeRepository(data_dir() / "promo_codes.json")


def validate_cart_handler() -> ValidateCartHandler:
    return ValidateCartHandler(product_repo=product_repository())


def validate_promo_code_handler() -> ValidatePromoCodeHandler:
    return ValidatePromoCodeHandler(promo_repo=promo_code_repository())


def calculate_order_total_handler() -> CalculateOrderTotalHandler:
    return CalculateOrderTotalHandler(
        cart_handler=validate_cart_handler(),
        promo_handler=validate_promo_code_handler(),
        settings=PricingSettings.from_env(),
    )
