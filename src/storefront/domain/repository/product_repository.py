"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, HTTP API,
in-memory) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist an updated product, keeping its position."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> int:
        """Replace the whole catalog; returns the number of products stored."""

