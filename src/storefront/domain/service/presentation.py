"""Human-readable descriptions of selections and cart lines."""

from __future__ import annotations

from storefront.domain.model.cart import CartLine
from storefront.domain.model.options import ProductOptions
from storefront.domain.model.selection import Selection

SEPARATOR = " • "


def describe_line(options: ProductOptions, line: CartLine) -> str:
    """Detail text shown under a cart line, e.g. "Color: Forest • Name: Rex"."""
    parts = [
        f"Color: {options.color_label(line.color)}" if line.color else "",
        f"Size: {options.size_label_for(line.size)}" if line.size else "",
        f"Name: {line.dog_name}" if line.dog_name else "No personalization",
        f"Note: {line.note}" if line.note else "",
    ]
    return SEPARATOR.join(p for p in parts if p)


def settings_summary(options: ProductOptions, selection: Selection) -> str:
    parts = []
    if selection.color:
        parts.append(f"Color: {options.color_label(selection.color)}")
    if selection.size:
        parts.append(f"Size: {options.size_label_for(selection.size)}")
    if options.dog_name and selection.dog_name:
        parts.append(f"Name: {selection.dog_name}")
    if options.note and selection.note:
        parts.append(f"Note: {selection.note}")
    return SEPARATOR.join(parts) if parts else "No options selected yet."
