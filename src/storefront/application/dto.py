"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CartActionResult:
    """Outcome of committing a selection to the cart.

    Option-validation failures are not raised to the caller: instead
    ``accepted`` is False and ``failed_field`` names the option to
    highlight ("size" or "dogName").
    """

    accepted: bool
    line_index: int | None = None
    failed_field: str = ""
    message: str = ""


@dataclass(frozen=True)
class CartLineDTO:
    index: int
    product_id: str
    product_name: str
    details: str
    image: str
    quantity: int
    unit_price: str  # formatted, e.g. "$12.50"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    count: int
    total: str


@dataclass(frozen=True)
class ProductPageDTO:
    id: str
    name: str
    price: str
    description: str
    gallery: list[str]
    colors: list[tuple[str, str]] = field(default_factory=list)  # (value, label)
    sizes: list[tuple[str, str]] = field(default_factory=list)
    size_label: str = "Size"
    sizes_required: bool = False
    dog_name: bool = False
    dog_name_required: bool = False
    note: bool = False
    summary: str = ""
    rating_average: float | None = None
    rating_count: int = 0


@dataclass(frozen=True)
class CheckoutItemSpec:
    """Input: one cart line as submitted for checkout."""

    product_id: str
    quantity: int = 1
    size: str = ""
    dog_name: str = ""
    note: str = ""
    color: str = ""
