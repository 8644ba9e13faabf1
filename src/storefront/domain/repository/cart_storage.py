"""Abstract durable storage for the shopper's cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import CartLine

CART_STORAGE_KEY = "gf_cart_v1"


class CartStorage(ABC):

    @abstractmethod
    def load(self) -> list[CartLine]:
        """Return the stored lines; missing or corrupt data yields []."""

    @abstractmethod
    def save(self, lines: list[CartLine]) -> None:
        """Persist the lines.  Raises StorageError on failure."""
