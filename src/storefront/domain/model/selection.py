"""Selection state: the not-yet-committed options a shopper is building.

There is one Selection per product the shopper has looked at.  It is
kept for the lifetime of the session and is independent of the cart:
committing a selection copies its values into a cart line.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from storefront.domain.model.product import Product


@dataclass(frozen=True)
class Selection:
    color: str = ""
    size: str = ""
    dog_name: str = ""
    note: str = ""

    def merged(self, patch: SelectionPatch | None) -> Selection:
        """Shallow merge: only the fields present in *patch* change."""
        if patch is None:
            return self
        return replace(self, **patch.present())


@dataclass(frozen=True)
class SelectionPatch:
    """A partial update; ``None`` means "leave this field alone"."""

    color: str | None = None
    size: str | None = None
    dog_name: str | None = None
    note: str | None = None

    def present(self) -> dict[str, str]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


class SelectionStore:
    """Keyed store of selections, product id -> Selection."""

    def __init__(self) -> None:
        self._store: dict[str, Selection] = {}

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._store

    def get_or_create(self, product_id: str) -> Selection:
        if product_id not in self._store:
            self._store[product_id] = Selection()
        return self._store[product_id]

    def set(self, product_id: str, patch: SelectionPatch | None) -> Selection:
        updated = self.get_or_create(product_id).merged(patch)
        self._store[product_id] = updated
        return updated

    def ensure_default_color(self, product: Product) -> Selection:
        """Adopt the product's first colour if nothing is chosen yet."""
        selection = self.get_or_create(product.id)
        if product.options.has_colors and not selection.color:
            selection = self.set(
                product.id, SelectionPatch(color=product.options.default_color())
            )
        return selection
