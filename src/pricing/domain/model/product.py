"""Product aggregate, as seen by the pricing core.

The catalog is owned elsewhere; here products are read-only snapshots
loaded in bulk, including inactive and soft-deleted rows so that
"gone" and "never existed" can be told apart.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from pricing.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductType:
    name: str
    has_sizes: bool = False


@dataclass(frozen=True)
class ProductImage:
    url: str
    alt_text: str | None = None


@dataclass(frozen=True)
class Product:
    """A product row from the catalog.

    ``title`` is localized (``{"es": ..., "en": ...}``).  Only the primary
    image is carried, which is all a cart line needs for display.
    """

    id: str
    slug: str
    price: Money
    product_type: ProductType
    # Compared but left out of the hash; a dict is unhashable.
    title: dict[str, str] = field(default_factory=dict, hash=False)
    is_active: bool = True
    deleted_at: datetime | None = None
    available_sizes: tuple[str, ...] | None = None
    primary_image: ProductImage | None = None

    @property
    def is_available(self) -> bool:
        return self.is_active and self.deleted_at is None
