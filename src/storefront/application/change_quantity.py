"""Application service: Change Quantity use case."""

from __future__ import annotations

from storefront.application.session import ShopSession
from storefront.domain.model.cart import CartLine


class ChangeQuantityHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, index: int, delta: int) -> CartLine | None:
        """Apply *delta* to a line; the line disappears when it reaches zero."""
        line = self._session.cart.change_quantity(index, delta)
        self._session.persist_cart()
        return line
