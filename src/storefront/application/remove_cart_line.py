"""Application service: Remove Cart Line use case."""

from __future__ import annotations

from storefront.application.session import ShopSession
from storefront.domain.model.cart import CartLine


class RemoveCartLineHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, index: int) -> CartLine:
        line = self._session.cart.remove_line(index)
        self._session.persist_cart()
        return line
