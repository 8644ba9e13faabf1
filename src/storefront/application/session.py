"""Shopping session: the single context that owns the shopper's state.

A ShopSession holds the catalog snapshot, the cart, the selection store
and the cart's durable storage.  Use-case handlers receive the session
explicitly instead of reaching for globals, so each test can build its
own isolated session.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, StorageError
from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product
from storefront.domain.model.selection import SelectionStore
from storefront.domain.repository.cart_storage import CartStorage

logger = logging.getLogger(__name__)


class ShopSession:

    def __init__(
        self,
        catalog: list[Product],
        cart_storage: CartStorage,
        cart: Cart | None = None,
    ) -> None:
        self._catalog = list(catalog)
        self._by_id = {p.id: p for p in self._catalog}
        self._cart_storage = cart_storage
        self.cart = cart if cart is not None else Cart()
        self.selections = SelectionStore()

    @classmethod
    def start(cls, catalog: list[Product], cart_storage: CartStorage) -> ShopSession:
        """Open a session, restoring whatever cart was stored last time."""
        return cls(catalog, cart_storage, Cart(cart_storage.load()))

    @property
    def catalog(self) -> list[Product]:
        return list(self._catalog)

    def find_product(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def find_by_key(self, key: str) -> Product | None:
        """Product-page lookup: id first, then slug or handle."""
        product = self.find_product(key)
        if product is not None:
            return product
        return next((p for p in self._catalog if p.matches_key(key)), None)

    def require_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product

    def persist_cart(self) -> bool:
        """Write the cart to storage.

        Failures are logged and swallowed; the in-memory cart stays the
        source of truth for the rest of the session.
        """
        try:
            self._cart_storage.save(self.cart.lines)
        except StorageError as exc:
            logger.warning("Could not persist cart: %s", exc)
            return False
        return True
