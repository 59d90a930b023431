"""Data Transfer Objects: the results handed back to callers.

All results are frozen and built fresh per call.  ``to_dict()`` gives
the camelCase shape used on the wire, with amounts as plain numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pricing.domain.model.cart import CartItemError, ValidatedLineItem
from pricing.domain.model.promo_code import DiscountType


def _number(amount: Decimal) -> float:
    return float(amount)


def line_item_to_dict(item: ValidatedLineItem) -> dict[str, Any]:
    image = item.product.primary_image
    return {
        "productId": item.product_id,
        "quantity": item.quantity,
        "size": item.size,
        "unitPrice": _number(item.unit_price),
        "subtotal": _number(item.subtotal),
        "product": {
            "title": dict(item.product.title),
            "slug": item.product.slug,
            "primaryImage": (
                {"url": image.url, "altText": image.alt_text} if image is not None else None
            ),
        },
        "status": item.status,
    }


def cart_error_to_dict(error: CartItemError) -> dict[str, Any]:
    return {
        "productId": error.product_id,
        "code": error.code.value,
        "message": error.message,
    }


@dataclass(frozen=True)
class CartSummary:
    subtotal: Decimal
    item_count: int


@dataclass(frozen=True)
class CartValidationResult:
    """Output of cart validation.

    ``items`` and ``errors`` partition the requested lines; the summary
    covers valid lines only.
    """

    valid: bool
    items: tuple[ValidatedLineItem, ...]
    summary: CartSummary
    errors: tuple[CartItemError, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "items": [line_item_to_dict(i) for i in self.items],
            "summary": {
                "subtotal": _number(self.summary.subtotal),
                "itemCount": self.summary.item_count,
            },
            "errors": [cart_error_to_dict(e) for e in self.errors],
        }


@dataclass(frozen=True)
class PromoValidationResult:
    """Output of promo code validation.

    ``calculated_discount`` is None on failure, and on success when the
    discount depends on an order amount that was not given.
    """

    valid: bool
    code: str
    message: str
    discount_type: DiscountType | None = None
    discount_value: Decimal | None = None
    calculated_discount: Decimal | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"valid": self.valid, "code": self.code}
        if self.valid and self.discount_type is not None and self.discount_value is not None:
            data["discountType"] = self.discount_type.value
            data["discountValue"] = _number(self.discount_value)
            data["calculatedDiscount"] = (
                _number(self.calculated_discount)
                if self.calculated_discount is not None
                else None
            )
        data["message"] = self.message
        return data


@dataclass(frozen=True)
class AppliedPromoCode:
    code: str
    discount_type: DiscountType
    discount_value: Decimal
    calculated_discount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "discountType": self.discount_type.value,
            "discountValue": _number(self.discount_value),
            "calculatedDiscount": _number(self.calculated_discount),
        }


@dataclass(frozen=True)
class OrderTotalResult:
    """Full financial breakdown of a cart.

    ``valid`` mirrors the cart: a rejected promo code only zeroes the
    discount and fills ``promo_code_message``.
    """

    valid: bool
    subtotal: Decimal
    discount_amount: Decimal
    shipping_cost: Decimal
    tax_amount: Decimal
    total: Decimal
    currency: str
    item_count: int
    validated_items: tuple[ValidatedLineItem, ...]
    applied_promo_code: AppliedPromoCode | None
    cart_errors: tuple[CartItemError, ...]
    promo_code_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "valid": self.valid,
            "subtotal": _number(self.subtotal),
            "discountAmount": _number(self.discount_amount),
            "shippingCost": _number(self.shipping_cost),
            "taxAmount": _number(self.tax_amount),
            "total": _number(self.total),
            "currency": self.currency,
            "itemCount": self.item_count,
            "validatedItems": [line_item_to_dict(i) for i in self.validated_items],
            "appliedPromoCode": (
                self.applied_promo_code.to_dict() if self.applied_promo_code else None
            ),
            "cartErrors": [cart_error_to_dict(e) for e in self.cart_errors],
        }
        if self.promo_code_message is not None:
            data["promoCodeMessage"] = self.promo_code_message
        return data
