"""Abstract read-only repository for PromoCode aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing.domain.model.promo_code import PromoCode


class PromoCodeRepository(ABC):

    @abstractmethod
    def get_by_code(self, code: str) -> PromoCode | None:
        """Return the promo code matching the upper-cased *code* exactly, or None."""
