"""Application service: Validate Cart use case.

Resolves every requested line against the current catalog in a single
bulk lookup and prices the lines that survive.  Lines that fail are
reported, not raised, so the caller can still show a partial total.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping

from pricing.application.dto import CartSummary, CartValidationResult
from pricing.application.validators import validate_cart_input
from pricing.domain.model.cart import CartItemError, LineItemRequest, ValidatedLineItem
from pricing.domain.model.value_objects import ZERO, round2
from pricing.domain.repository.product_repository import ProductRepository
from pricing.domain.service.line_item_classifier import classify_line_item

logger = logging.getLogger(__name__)


class ValidateCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, payload: Mapping[str, Any]) -> CartValidationResult:
        """Validate a ``{"items": [...]}`` request.

        Raises InvalidCartDataError if the request itself is malformed.
        """
        validated = validate_cart_input(payload)
        return self.validate_items(validated.items)

    def validate_items(self, items: tuple[LineItemRequest, ...]) -> CartValidationResult:
        """Classify already shape-checked lines.

        Steps:
        1. Deduplicate product ids and load them all in one query.
        2. Run each line through the guard chain (one outcome per line).
        3. Sum the individually rounded line subtotals.
        """
        unique_ids = list(dict.fromkeys(item.product_id for item in items))
        products = {p.id: p for p in self._product_repo.find_by_ids(unique_ids)}

        valid_items: list[ValidatedLineItem] = []
        errors: list[CartItemError] = []

        for item in items:
            outcome = classify_line_item(item, products.get(item.product_id))
            if isinstance(outcome, CartItemError):
                errors.append(outcome)
            else:
                valid_items.append(outcome)

        subtotal: Decimal = round2(sum((i.subtotal for i in valid_items), ZERO))
        item_count = sum(i.quantity for i in valid_items)

        logger.info(
            "Cart validated: %d line(s) valid, %d rejected, subtotal %s",
            len(valid_items), len(errors), subtotal,
        )

        return CartValidationResult(
            valid=not errors,
            items=tuple(valid_items),
            summary=CartSummary(subtotal=subtotal, item_count=item_count),
            errors=tuple(errors),
        )
