"""Request shape validation.

Runs before any catalog or promo lookup.  Each use case raises its own
``ValidationError`` subclass; every error names the offending field
(``items[2].quantity``, ``promoCode``...) so callers can point at it.

Payloads are plain mappings as decoded from JSON, hence the ``Any``s:
nothing about their types is trusted until it has been checked here.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from pricing.domain.exceptions import (
    InvalidCartDataError,
    InvalidOrderTotalDataError,
    InvalidPromoCodeDataError,
    ValidationError,
)
from pricing.domain.model.cart import LineItemRequest
from pricing.domain.model.value_objects import to_decimal

MAX_CART_ITEMS = 50
MAX_QUANTITY_PER_ITEM = 99
MAX_SIZE_LENGTH = 20
MAX_PROMO_CODE_LENGTH = 50

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


@dataclass(frozen=True)
class ValidatedCartInput:
    items: tuple[LineItemRequest, ...]


@dataclass(frozen=True)
class ValidatedPromoCodeInput:
    code: str
    order_total: Decimal | None = None


@dataclass(frozen=True)
class ValidatedOrderTotalInput:
    items: tuple[LineItemRequest, ...]
    promo_code: str | None = None


# --- Field helpers ------------------------------------------------------------


def _uuid(value: Any, field: str, error: type[ValidationError]) -> str:
    if not value or not isinstance(value, str):
        raise error("ID is required", field)
    if not _UUID_RE.match(value):
        raise error("Invalid ID format", field)
    return value


def _quantity(value: Any, field: str, error: type[ValidationError]) -> int:
    # bool is an int subclass; True is not a quantity
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error(f"{field} is required and must be a number", field)
    if isinstance(value, float):
        if not value.is_integer():
            raise error(f"{field} must be an integer", field)
        value = int(value)
    if value < 1:
        raise error(f"{field} must be at least 1", field)
    if value > MAX_QUANTITY_PER_ITEM:
        raise error(f"{field} cannot exceed {MAX_QUANTITY_PER_ITEM}", field)
    return value


def _trimmed_text(value: str, field: str, max_length: int, error: type[ValidationError]) -> str:
    trimmed = value.strip()
    if not trimmed:
        raise error(f"{field} cannot be empty", field)
    if len(trimmed) > max_length:
        raise error(f"{field} cannot exceed {max_length} characters", field)
    return trimmed


def _optional_text(
    value: Any,
    field: str,
    max_length: int,
    error: type[ValidationError],
) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise error(f"{field} must be a string", field)
    return _trimmed_text(value, field, max_length, error)


def _items(payload: Mapping[str, Any], error: type[ValidationError]) -> tuple[LineItemRequest, ...]:
    items = payload.get("items")
    if not isinstance(items, (list, tuple)):
        raise error("items must be a non-empty array", "items")
    if not items:
        raise error("items array cannot be empty", "items")
    if len(items) > MAX_CART_ITEMS:
        raise error(f"items array cannot exceed {MAX_CART_ITEMS} items", "items")

    validated: list[LineItemRequest] = []
    for index, raw in enumerate(items):
        prefix = f"items[{index}]"
        if not isinstance(raw, Mapping):
            raise error(f"{prefix} must be an object", prefix)
        validated.append(
            LineItemRequest(
                product_id=_uuid(raw.get("productId"), f"{prefix}.productId", error),
                quantity=_quantity(raw.get("quantity"), f"{prefix}.quantity", error),
                size=_optional_text(raw.get("size"), f"{prefix}.size", MAX_SIZE_LENGTH, error),
            )
        )
    return tuple(validated)


# --- Use case validators ------------------------------------------------------


def validate_cart_input(payload: Mapping[str, Any]) -> ValidatedCartInput:
    """Validate ``{"items": [...]}``.

    Raises InvalidCartDataError on the first malformed field.
    """
    return ValidatedCartInput(items=_items(payload, InvalidCartDataError))


def validate_promo_code_input(payload: Mapping[str, Any]) -> ValidatedPromoCodeInput:
    """Validate ``{"code": str, "orderTotal"?: number}``.

    The code is trimmed and upper-cased; lookups are case-insensitive by
    normalization.
    """
    code = payload.get("code")
    if not isinstance(code, str):
        raise InvalidPromoCodeDataError("code is required and must be a string", "code")
    code = _trimmed_text(code, "code", MAX_PROMO_CODE_LENGTH, InvalidPromoCodeDataError)

    order_total: Decimal | None = None
    if "orderTotal" in payload and payload["orderTotal"] is not None:
        order_total = _order_total(payload["orderTotal"])

    return ValidatedPromoCodeInput(code=code.upper(), order_total=order_total)


def _order_total(value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidPromoCodeDataError("orderTotal must be a number", "orderTotal")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidPromoCodeDataError("orderTotal must be a number", "orderTotal")
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidPromoCodeDataError("orderTotal must be a number", "orderTotal")
    if value < 0:
        raise InvalidPromoCodeDataError("orderTotal must be at least 0", "orderTotal")
    return to_decimal(value)


def validate_order_total_input(payload: Mapping[str, Any]) -> ValidatedOrderTotalInput:
    """Validate ``{"items": [...], "promoCode"?: str}``.

    Same item rules as the cart; the promo code, when present, is
    trimmed and upper-cased.
    """
    items = _items(payload, InvalidOrderTotalDataError)
    promo_code = _optional_text(
        payload.get("promoCode"), "promoCode", MAX_PROMO_CODE_LENGTH, InvalidOrderTotalDataError
    )
    return ValidatedOrderTotalInput(
        items=items,
        promo_code=promo_code.upper() if promo_code is not None else None,
    )
