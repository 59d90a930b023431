"""Domain-level exceptions.

Only malformed *input* is raised. Business outcomes (unknown product,
expired promo code, ...) are returned as result data so callers can
render partial success.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """The shape of a request is invalid.

    ``field`` points at the offending input, e.g. ``items[2].quantity``.
    """

    code = "INVALID_DATA"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidCartDataError(ValidationError):
    code = "INVALID_CART_DATA"


class InvalidPromoCodeDataError(ValidationError):
    code = "INVALID_PROMO_CODE_DATA"


class InvalidOrderTotalDataError(ValidationError):
    code = "INVALID_ORDER_TOTAL_DATA"
