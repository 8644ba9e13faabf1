"""Cart aggregate — the core of the domain.

The Cart owns its line items.  A line is a product plus one specific
combination of options plus a quantity.  Two lines are the same line
when the product id and all four option fields are equal; the empty
string is a value like any other, not "unset".

Lines are addressed by position, the way the shopper sees them listed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class LineOptions:
    """Validated option values ready to be committed to a cart line."""

    size: str = ""
    dog_name: str = ""
    note: str = ""
    color: str = ""


@dataclass
class CartLine:
    """One entry of the cart.

    Invariant: ``quantity`` is always >= 1.  A line whose quantity would
    drop to zero is removed by the Cart instead.
    """

    product_id: str
    quantity: int = 1
    size: str = ""
    dog_name: str = ""
    note: str = ""
    color: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 1:
            raise ValidationError("Quantity must be positive")

    @property
    def identity(self) -> tuple[str, str, str, str, str]:
        return (self.product_id, self.size, self.dog_name, self.note, self.color)

    @property
    def options(self) -> LineOptions:
        return LineOptions(
            size=self.size, dog_name=self.dog_name, note=self.note, color=self.color
        )


def line_identity(product_id: str, options: LineOptions) -> tuple[str, str, str, str, str]:
    return (product_id, options.size, options.dog_name, options.note, options.color)


class Cart:
    """Aggregate root for the shopping cart.

    All operations are pure in-memory state transitions.  Validation of
    the options and persistence happen around these calls, in the
    application layer.
    """

    def __init__(self, lines: Iterable[CartLine] | None = None) -> None:
        self._lines: list[CartLine] = list(lines or [])

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def line(self, index: int) -> CartLine:
        return self._lines[self._check_index(index)]

    # --- Mutations ------------------------------------------------------------

    def add_or_increment(self, product_id: str, options: LineOptions) -> int:
        """Merge into the matching line or append a new one.

        Returns the index of the line that received the unit.
        """
        key = line_identity(product_id, options)
        for i, existing in enumerate(self._lines):
            if existing.identity == key:
                existing.quantity += 1
                return i

        self._lines.append(
            CartLine(
                product_id=product_id,
                quantity=1,
                size=options.size,
                dog_name=options.dog_name,
                note=options.note,
                color=options.color,
            )
        )
        return len(self._lines) - 1

    def update_line(self, index: int, options: LineOptions) -> CartLine:
        """Overwrite a line's options in place.

        No merge search is done: the line keeps its position even if it
        now has the same identity as another line.  An empty colour
        keeps the line's previous colour.
        """
        line = self.line(index)
        line.size = options.size
        line.dog_name = options.dog_name
        line.note = options.note
        line.color = options.color or line.color
        return line

    def change_quantity(self, index: int, delta: int) -> CartLine | None:
        """Adjust a line's quantity; returns None when the line was removed."""
        line = self.line(index)
        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            del self._lines[index]
            return None
        line.quantity = new_quantity
        return line

    def remove_line(self, index: int) -> CartLine:
        return self._lines.pop(self._check_index(index))

    # --- Computed properties --------------------------------------------------

    def count(self) -> int:
        """Number of units in the cart (not number of lines)."""
        return sum(line.quantity for line in self._lines)

    def total(self, catalog: Iterable[Product]) -> Money:
        """Sum of price x quantity.

        Lines whose product is no longer in the catalog contribute nothing.
        """
        prices = {product.id: product.price for product in catalog}
        result = Money.zero()
        for line in self._lines:
            price = prices.get(line.product_id)
            if price is None:
                continue
            result = result + price * line.quantity
        return result

    # --- Internal helpers -----------------------------------------------------

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._lines):
            raise EntityNotFoundError(f"Cart line #{index + 1} not found")
        return index
