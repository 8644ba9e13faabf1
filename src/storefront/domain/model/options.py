"""Per-product customization options.

The catalog describes which options a product offers: colour swatches,
sizes, a personalization name ("dog name") and a free-text note.  Sizes
may be listed as bare labels (``"M"``) or as ``{"value", "label"}``
objects; both forms are accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_SIZE_LABEL = "Size"


@dataclass(frozen=True)
class ColorOption:
    value: str
    label: str = ""
    swatch: str = ""
    image: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.value

    @staticmethod
    def from_raw(raw: dict[str, Any]) -> ColorOption:
        return ColorOption(
            value=str(raw.get("value") or ""),
            label=str(raw.get("label") or ""),
            swatch=str(raw.get("swatch") or ""),
            image=str(raw.get("image") or ""),
        )


@dataclass(frozen=True)
class SizeOption:
    value: str
    label: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.value

    @staticmethod
    def from_raw(raw: Any) -> SizeOption:
        if isinstance(raw, dict):
            return SizeOption(
                value=str(raw.get("value") or ""),
                label=str(raw.get("label") or ""),
            )
        # Bare label: value and label are the same string.
        return SizeOption(value=str(raw), label=str(raw))


@dataclass(frozen=True)
class ProductOptions:
    """Options descriptor attached to a product.

    ``colors`` and ``sizes`` are ``None`` when the product does not offer
    them at all.  An empty list still counts as "offered".
    """

    colors: tuple[ColorOption, ...] | None = None
    sizes: tuple[SizeOption, ...] | None = None
    size_label: str = DEFAULT_SIZE_LABEL
    sizes_required: bool = False
    dog_name: bool = False
    dog_name_prompt: bool = False
    note: bool = False

    @property
    def has_colors(self) -> bool:
        return self.colors is not None

    @property
    def has_sizes(self) -> bool:
        return self.sizes is not None

    @property
    def name_required(self) -> bool:
        return self.dog_name and self.dog_name_prompt

    def default_color(self) -> str:
        if self.colors:
            return self.colors[0].value
        return ""

    def find_color(self, value: str) -> ColorOption | None:
        for color in self.colors or ():
            if color.value == value:
                return color
        return None

    def find_size(self, value: str) -> SizeOption | None:
        for size in self.sizes or ():
            if size.value == value:
                return size
        return None

    def color_label(self, value: str) -> str:
        color = self.find_color(value) if value else None
        return color.display_label if color else value

    def size_label_for(self, value: str) -> str:
        size = self.find_size(value) if value else None
        return size.display_label if size else value

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def from_raw(raw: dict[str, Any] | None) -> ProductOptions:
        raw = raw or {}
        colors = raw.get("colors")
        sizes = raw.get("sizes")
        return ProductOptions(
            colors=(
                tuple(ColorOption.from_raw(c) for c in colors if isinstance(c, dict))
                if isinstance(colors, list)
                else None
            ),
            sizes=(
                tuple(SizeOption.from_raw(s) for s in sizes)
                if isinstance(sizes, list)
                else None
            ),
            size_label=str(raw.get("sizeLabel") or DEFAULT_SIZE_LABEL),
            sizes_required=bool(raw.get("sizesRequired")),
            dog_name=bool(raw.get("dogName")),
            dog_name_prompt=bool(raw.get("dogNamePrompt")),
            note=bool(raw.get("note")),
        )

