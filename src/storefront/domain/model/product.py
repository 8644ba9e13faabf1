"""Product aggregate.

Products live independently of carts. They have their own lifecycle:
the admin replaces the catalog wholesale and shoppers rate products.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.model.options import ProductOptions
from storefront.domain.model.value_objects import Money, Rating

MAX_GALLERY_IMAGES = 10


@dataclass
class Product:
    """A product in the catalog.

    ``extra`` holds every key of the catalog record that the domain does
    not model (tags, features, details, the raw ``options`` mapping...)
    so that a read/write cycle never loses admin data.
    """

    id: str
    name: str
    price: Money
    description: str = ""
    image: str = ""
    images: list[str] = field(default_factory=list)
    options: ProductOptions = field(default_factory=ProductOptions)
    slug: str = ""
    handle: str = ""
    rating_count: int = 0
    rating_total: int = 0
    rating_average: float | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def matches_key(self, key: str) -> bool:
        """True if *key* is this product's slug or handle."""
        return bool(key) and key in (self.slug, self.handle)

    def record_rating(self, rating: Rating) -> None:
        self.rating_count += 1
        self.rating_total += rating.value
        self.rating_average = self.rating_total / self.rating_count

    # --- Images ---------------------------------------------------------------

    def display_image(self, color: str = "") -> str:
        """The selected colour's own image if it has one, else the main image."""
        swatch = self.options.find_color(color) if color else None
        if swatch is not None and swatch.image:
            return swatch.image
        return self.image

    def gallery(self, color: str = "") -> list[str]:
        """Images for the product page, display image first, de-duplicated."""
        out: list[str] = []
        first = self.display_image(color)
        if first:
            out.append(first)
        for src in self.images:
            if src and src not in out:
                out.append(src)
        if not out and self.image:
            out.append(self.image)
        return out[:MAX_GALLERY_IMAGES]
