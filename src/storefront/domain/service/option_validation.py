"""Domain service: Option Validation.

Decides whether a candidate selection may be committed to the cart for
a given product, and produces the normalized option values to commit.

Rules, first failure wins:
  1. ``sizesRequired`` and no size chosen          -> SizeRequiredError
  2. name supported *and* prompted, and the name
     normalizes to nothing                         -> NameRequiredError

Every path that commits options (quick-view add, product-page add,
editing an existing cart line) goes through ``validate_selection`` so
they all accept and normalize exactly the same inputs.
"""

from __future__ import annotations

import re

from storefront.domain.exceptions import NameRequiredError, SizeRequiredError
from storefront.domain.model.cart import LineOptions
from storefront.domain.model.product import Product
from storefront.domain.model.selection import Selection, SelectionPatch

MAX_NAME_LENGTH = 15
NO_NAME = "none"

_NO_NAME_TOKENS = re.compile(r"^(blank|none)$", re.IGNORECASE)


def normalize_dog_name(raw: str | None) -> str | None:
    """Normalize a personalization name.

    Returns None when the input is empty after trimming.  "blank" and
    "none" (any case) become the literal ``"none"``; anything else is
    cut to ``MAX_NAME_LENGTH`` characters.  Casing is otherwise kept, so
    "Max" and "max" stay different names.
    """
    value = (raw or "").strip()
    if not value:
        return None
    if _NO_NAME_TOKENS.match(value):
        return NO_NAME
    return value[:MAX_NAME_LENGTH]


def validate_selection(product: Product, candidate: Selection) -> LineOptions:
    """Validate *candidate* against *product*'s options.

    Raises SizeRequiredError or NameRequiredError; on success returns the
    option values to store on the cart line.
    """
    opt = product.options

    if opt.sizes_required and not candidate.size:
        raise SizeRequiredError(f"Please choose a {opt.size_label.lower()} for {product.name}")

    if opt.name_required:
        dog_name = normalize_dog_name(candidate.dog_name)
        if dog_name is None:
            raise NameRequiredError(
                f"Please enter a name for {product.name} (or type 'none')"
            )
    elif opt.dog_name:
        dog_name = candidate.dog_name.strip()
    else:
        dog_name = ""

    return LineOptions(
        size=candidate.size if opt.has_sizes else "",
        dog_name=dog_name,
        note=candidate.note.strip() if opt.note else "",
        color=candidate.color if opt.has_colors else "",
    )


def restrict_to_supported(product: Product, patch: SelectionPatch | None) -> SelectionPatch | None:
    """Drop patch fields for options the product does not offer.

    Note and personalization name are trimmed on the way in.
    """
    if patch is None:
        return None
    opt = product.options
    return SelectionPatch(
        color=patch.color if opt.has_colors else None,
        size=patch.size if opt.has_sizes else None,
        dog_name=patch.dog_name.strip() if opt.dog_name and patch.dog_name is not None else None,
        note=patch.note.strip() if opt.note and patch.note is not None else None,
    )
