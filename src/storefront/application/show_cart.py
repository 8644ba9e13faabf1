"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, CartLineDTO
from storefront.application.session import ShopSession
from storefront.domain.service.presentation import describe_line


class ShowCartHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self) -> CartDTO:
        """Lines whose product left the catalog are not listed and cost nothing."""
        cart = self._session.cart
        lines: list[CartLineDTO] = []
        for index, line in enumerate(cart.lines):
            product = self._session.find_product(line.product_id)
            if product is None:
                continue
            lines.append(
                CartLineDTO(
                    index=index,
                    product_id=product.id,
                    product_name=product.name,
                    details=describe_line(product.options, line),
                    image=product.display_image(line.color),
                    quantity=line.quantity,
                    unit_price=str(product.price),
                    line_total=str(product.price * line.quantity),
                )
            )
        return CartDTO(
            lines=lines,
            count=cart.count(),
            total=str(cart.total(self._session.catalog)),
        )
