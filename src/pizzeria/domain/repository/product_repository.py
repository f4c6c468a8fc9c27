"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only here, and an unavailable
catalog yields an empty list rather than an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.product import Category, Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""
        wanted = name.strip().lower()
        for product in self.list_all():
            if product.name.lower() == wanted:
                return product
        return None

    def list_by_category(self, category: Category) -> list[Product]:
        return [p for p in self.list_all() if p.category is category]
