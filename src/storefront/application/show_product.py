"""Application service: Show Product use case (query).

Displaying a product for the first time adopts its default colour into
the shopper's selection, the same as adding it to the cart would.
"""

from __future__ import annotations

from storefront.application.dto import ProductPageDTO
from storefront.application.session import ShopSession
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.service.presentation import settings_summary


class ShowProductHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, key: str) -> ProductPageDTO:
        key = (key or "").strip()
        if not key:
            raise EntityNotFoundError("Missing product id.")

        product = self._session.find_by_key(key)
        if product is None:
            raise EntityNotFoundError("Product not found.")

        selection = self._session.selections.ensure_default_color(product)
        opt = product.options
        return ProductPageDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            description=product.description,
            gallery=product.gallery(selection.color),
            colors=[(c.value, c.display_label) for c in opt.colors or ()],
            sizes=[(s.value, s.display_label) for s in opt.sizes or ()],
            size_label=opt.size_label,
            sizes_required=opt.sizes_required,
            dog_name=opt.dog_name,
            dog_name_required=opt.name_required,
            note=opt.note,
            summary=settings_summary(opt, selection),
            rating_average=product.rating_average,
            rating_count=product.rating_count,
        )
