"""Application service: Update Cart Line use case.

Editing a line re-opens its options, seeded from the line itself, and
runs them through the same validation as adding.  The line is updated
in place; it is never merged with another line.
"""

from __future__ import annotations

from storefront.application.dto import CartActionResult
from storefront.application.session import ShopSession
from storefront.domain.exceptions import OptionValidationError
from storefront.domain.model.selection import SelectionPatch
from storefront.domain.service.option_validation import (
    restrict_to_supported,
    validate_selection,
)


class UpdateCartLineHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, index: int, patch: SelectionPatch | None = None) -> CartActionResult:
        cart = self._session.cart
        line = cart.line(index)
        product = self._session.require_product(line.product_id)
        selections = self._session.selections

        selections.set(
            product.id,
            SelectionPatch(
                color=line.color,
                size=line.size,
                dog_name=line.dog_name,
                note=line.note,
            ),
        )
        candidate = selections.set(product.id, restrict_to_supported(product, patch))

        try:
            options = validate_selection(product, candidate)
        except OptionValidationError as exc:
            return CartActionResult(
                accepted=False, line_index=index, failed_field=exc.field, message=str(exc)
            )

        selections.set(
            product.id,
            SelectionPatch(size=options.size, dog_name=options.dog_name, note=options.note),
        )
        cart.update_line(index, options)
        self._session.persist_cart()
        return CartActionResult(accepted=True, line_index=index)
