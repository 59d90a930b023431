"""Domain service: classify a requested cart line against the catalog.

The rejection reasons are mutually exclusive and order-sensitive
(existence, then availability, then sizing), so they are expressed as
an ordered chain of guards where the first match wins.  A line that
passes every guard is priced at the product's current price.
"""

from __future__ import annotations

import logging
from typing import Callable

from pricing.domain.model.cart import (
    CartErrorCode,
    CartItemError,
    LineItemRequest,
    ProductSummary,
    ValidatedLineItem,
)
from pricing.domain.model.product import Product

logger = logging.getLogger(__name__)

Guard = Callable[[LineItemRequest, Product], CartErrorCode | None]


def _inactive(item: LineItemRequest, product: Product) -> CartErrorCode | None:
    if not product.is_available:
        return CartErrorCode.PRODUCT_INACTIVE
    return None


def _size_required(item: LineItemRequest, product: Product) -> CartErrorCode | None:
    if product.product_type.has_sizes and not item.size:
        return CartErrorCode.SIZE_REQUIRED
    return None


def _size_not_allowed(item: LineItemRequest, product: Product) -> CartErrorCode | None:
    if not product.product_type.has_sizes and item.size:
        return CartErrorCode.SIZE_NOT_ALLOWED
    return None


def _invalid_size(item: LineItemRequest, product: Product) -> CartErrorCode | None:
    if not (product.product_type.has_sizes and item.size):
        return None
    if not product.available_sizes or item.size not in product.available_sizes:
        return CartErrorCode.INVALID_SIZE
    return None


# Run after the existence check, in this order.
GUARDS: tuple[Guard, ...] = (
    _inactive,
    _size_required,
    _size_not_allowed,
    _invalid_size,
)


def _reject(item: LineItemRequest, code: CartErrorCode) -> CartItemError:
    logger.debug("Line %s rejected: %s", item.product_id, code.value)
    return CartItemError.of(item.product_id, code)


def classify_line_item(
    item: LineItemRequest,
    product: Product | None,
) -> ValidatedLineItem | CartItemError:
    """Return a priced line, or the error for the first guard that rejects it."""
    if product is None:
        return _reject(item, CartErrorCode.PRODUCT_NOT_FOUND)

    for guard in GUARDS:
        code = guard(item, product)
        if code is not None:
            return _reject(item, code)

    return ValidatedLineItem(
        product_id=item.product_id,
        quantity=item.quantity,
        size=item.size,
        unit_price=product.price.amount,
        subtotal=(product.price * item.quantity).rounded().amount,
        product=ProductSummary(
            slug=product.slug,
            title=dict(product.title),
            primary_image=product.primary_image,
        ),
    )
