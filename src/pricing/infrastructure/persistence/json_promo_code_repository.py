"""JSON-file-backed implementation of PromoCodeRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pricing.domain.model.promo_code import DiscountType, PromoCode
from pricing.domain.repository.promo_code_repository import PromoCodeRepository
from pricing.infrastructure.persistence._json import (
    load_rows,
    parse_datetime,
    parse_decimal,
)


class JsonPromoCodeRepository(PromoCodeRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- PromoCodeRepository interface ----------------------------------------

    def get_by_code(self, code: str) -> PromoCode | None:
        # Codes are stored upper-cased; the match is exact.
        for row in load_rows(self._file_path):
            if row["code"] == code:
                return self._to_promo_code(row)
        return None

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_promo_code(row: dict[str, Any]) -> PromoCode:
        valid_from = parse_datetime(row.get("validFrom"))
        if valid_from is None:
            raise ValueError(f"Promo code {row['code']} has no validFrom")
        discount_value = parse_decimal(row.get("discountValue"))
        if discount_value is None:
            raise ValueError(f"Promo code {row['code']} has no discountValue")
        return PromoCode(
            code=row["code"],
            is_active=row.get("isActive", True),
            discount_type=DiscountType(row["discountType"]),
            discount_value=discount_value,
            min_order_amount=parse_decimal(row.get("minOrderAmount")),
            max_discount_amount=parse_decimal(row.get("maxDiscountAmount")),
            max_uses=row.get("maxUses"),
            max_uses_per_user=row.get("maxUsesPerUser"),
            current_uses=row.get("currentUses", 0),
            valid_from=valid_from,
            valid_until=parse_datetime(row.get("validUntil")),
        )
