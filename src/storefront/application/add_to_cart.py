"""Application service: Add To Cart use case.

Covers every "add" entry point: the plain Add button on a product card
(no patch, uses the stored selection), the quick-view dialog and the
full product page (both submit a patch of the fields they show).
"""

from __future__ import annotations

from storefront.application.dto import CartActionResult
from storefront.application.session import ShopSession
from storefront.domain.exceptions import OptionValidationError
from storefront.domain.model.cart import LineOptions
from storefront.domain.model.selection import SelectionPatch
from storefront.domain.service.option_validation import (
    restrict_to_supported,
    validate_selection,
)


class AddToCartHandler:

    def __init__(self, session: ShopSession) -> None:
        self._session = session

    def handle(self, product_id: str, patch: SelectionPatch | None = None) -> CartActionResult:
        """Validate the selection and merge it into the cart.

        Steps:
        1. Resolve the product (fail if it is not in the catalog).
        2. Store the submitted fields; an empty colour adopts the default.
        3. Validate; on failure report the offending field, change nothing.
        4. Remember the committed values, merge into the cart, persist.
        """
        product = self._session.require_product(product_id)
        selections = self._session.selections

        selections.set(product.id, restrict_to_supported(product, patch))
        candidate = selections.ensure_default_color(product)

        try:
            options = validate_selection(product, candidate)
        except OptionValidationError as exc:
            return CartActionResult(
                accepted=False, failed_field=exc.field, message=str(exc)
            )

        selections.set(product.id, _as_patch(options))
        index = self._session.cart.add_or_increment(product.id, options)
        self._session.persist_cart()
        return CartActionResult(accepted=True, line_index=index)


def _as_patch(options: LineOptions) -> SelectionPatch:
    return SelectionPatch(
        color=options.color,
        size=options.size,
        dog_name=options.dog_name,
        note=options.note,
    )
