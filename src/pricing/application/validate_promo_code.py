"""Application service: Validate Promo Code use case.

Checks a code's eligibility and, when eligible, computes the capped
discount for an optional order amount.  Every business outcome comes
back as a ``PromoValidationResult``; only a malformed request raises.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, Mapping

from pricing.application.dto import PromoValidationResult
from pricing.application.validators import validate_promo_code_input
from pricing.domain.repository.promo_code_repository import PromoCodeRepository

logger = logging.getLogger(__name__)

PROMO_APPLIED_MESSAGE = "Promo code applied"
PROMO_NOT_FOUND_MESSAGE = "Promo code not found"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ValidatePromoCodeHandler:

    def __init__(
        self,
        promo_repo: PromoCodeRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._promo_repo = promo_repo
        self._clock = clock

    def handle(self, payload: Mapping[str, Any]) -> PromoValidationResult:
        """Validate a ``{"code": ..., "orderTotal"?: ...}`` request.

        Raises InvalidPromoCodeDataError if the request itself is malformed.
        """
        validated = validate_promo_code_input(payload)
        return self.evaluate(validated.code, validated.order_total)

    def evaluate(self, code: str, order_total: Decimal | None = None) -> PromoValidationResult:
        """Evaluate an already normalized (trimmed, upper-cased) code.

        Reads the usage counter as-is; nothing is reserved or incremented.
        """
        promo = self._promo_repo.get_by_code(code)
        if promo is None:
            logger.info("Promo code %s rejected: not found", code)
            return PromoValidationResult(valid=False, code=code, message=PROMO_NOT_FOUND_MESSAGE)

        reason = promo.ineligibility_reason(self._clock(), order_total)
        if reason is not None:
            logger.info("Promo code %s rejected: %s", promo.code, reason)
            return PromoValidationResult(valid=False, code=promo.code, message=reason)

        discount = promo.discount_for(order_total)
        logger.info("Promo code %s accepted, discount %s", promo.code, discount)

        return PromoValidationResult(
            valid=True,
            code=promo.code,
            message=PROMO_APPLIED_MESSAGE,
            discount_type=promo.discount_type,
            discount_value=promo.discount_value,
            calculated_discount=discount,
        )
