"""Abstract read-only repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        """Return every product whose id is in *product_ids*.

        Inactive and soft-deleted products are included. Unknown ids are
        simply absent from the result.
        """
