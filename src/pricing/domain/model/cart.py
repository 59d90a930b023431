"""Cart line outcomes.

Every requested line ends up as exactly one of these: a priced
``ValidatedLineItem`` or a ``CartItemError`` explaining why it was
dropped from the totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from pricing.domain.model.product import ProductImage


class CartErrorCode(Enum):
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    PRODUCT_INACTIVE = "PRODUCT_INACTIVE"
    SIZE_REQUIRED = "SIZE_REQUIRED"
    SIZE_NOT_ALLOWED = "SIZE_NOT_ALLOWED"
    INVALID_SIZE = "INVALID_SIZE"


ERROR_MESSAGES: dict[CartErrorCode, str] = {
    CartErrorCode.PRODUCT_NOT_FOUND: "Product not found",
    CartErrorCode.PRODUCT_INACTIVE: "Product is no longer available",
    CartErrorCode.SIZE_REQUIRED: "A size is required for this product",
    CartErrorCode.SIZE_NOT_ALLOWED: "This product does not have sizes",
    CartErrorCode.INVALID_SIZE: "Selected size is not available for this product",
}


@dataclass(frozen=True)
class LineItemRequest:
    """One requested cart line, already shape-checked."""

    product_id: str
    quantity: int
    size: str | None = None


@dataclass(frozen=True)
class CartItemError:
    product_id: str
    code: CartErrorCode
    message: str

    @staticmethod
    def of(product_id: str, code: CartErrorCode) -> CartItemError:
        return CartItemError(product_id=product_id, code=code, message=ERROR_MESSAGES[code])


@dataclass(frozen=True)
class ProductSummary:
    """What a cart line needs to display its product."""

    slug: str
    # Compared but left out of the hash; a dict is unhashable.
    title: dict[str, str] = field(default_factory=dict, hash=False)
    primary_image: ProductImage | None = None


@dataclass(frozen=True)
class ValidatedLineItem:
    """A line that passed every catalog check, priced at the current price."""

    product_id: str
    quantity: int
    size: str | None
    unit_price: Decimal
    subtotal: Decimal  # round2(unit_price * quantity)
    product: ProductSummary
    status: str = "valid"
