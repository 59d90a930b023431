"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pricing.domain.model.product import Product, ProductImage, ProductType
from pricing.domain.model.value_objects import Money
from pricing.domain.repository.product_repository import ProductRepository
from pricing.infrastructure.persistence._json import load_rows, parse_datetime


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        wanted = set(product_ids)
        return [
            self._to_product(row)
            for row in load_rows(self._file_path)
            if row["id"] in wanted
        ]

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_product(row: dict[str, Any]) -> Product:
        product_type = row.get("productType") or {}
        image = row.get("primaryImage")
        sizes = row.get("availableSizes")
        return Product(
            id=row["id"],
            slug=row["slug"],
            title=dict(row.get("title") or {}),
            price=Money.of(row["price"], row.get("currency", "MXN")),
            is_active=row.get("isActive", True),
            deleted_at=parse_datetime(row.get("deletedAt")),
            available_sizes=tuple(sizes) if sizes is not None else None,
            product_type=ProductType(
                name=product_type.get("name", ""),
                has_sizes=product_type.get("hasSizes", False),
            ),
            primary_image=(
                ProductImage(url=image["url"], alt_text=image.get("altText"))
                if image
                else None
            ),
        )
