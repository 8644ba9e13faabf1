"""Mapping between catalog JSON records and Product aggregates.

The same record shape is used by the catalog file, the public API and
the admin save payload, so every layer converts through here.  Keys
the domain does not model are carried in ``Product.extra`` and written
back unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.options import ProductOptions
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

_MODELED_KEYS = frozenset(
    {
        "id",
        "name",
        "price",
        "description",
        "image",
        "images",
        "slug",
        "handle",
        "ratingCount",
        "ratingTotal",
        "ratingAverage",
    }
)


def record_id(raw: dict[str, Any]) -> str:
    """The id a catalog record is known by; a record without one goes by its slug."""
    return str(raw.get("id") or raw.get("slug") or "")


def product_from_record(raw: dict[str, Any]) -> Product:
    product_id = record_id(raw)
    if not product_id:
        raise ValidationError("Each product must have an id (or slug)")
    images = raw.get("images")
    try:
        rating_count = int(raw.get("ratingCount") or 0)
        rating_total = int(raw.get("ratingTotal") or 0)
        average = raw.get("ratingAverage")
        rating_average = float(average) if average is not None else None
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid product '{product_id}': {exc}") from exc
    return Product(
        id=product_id,
        name=str(raw.get("name") or ""),
        price=Money.of(raw.get("price") or 0),
        description=str(raw.get("description") or ""),
        image=str(raw.get("image") or ""),
        images=[str(src) for src in images if src] if isinstance(images, list) else [],
        options=ProductOptions.from_raw(
            raw.get("options") if isinstance(raw.get("options"), dict) else None
        ),
        slug=str(raw.get("slug") or ""),
        handle=str(raw.get("handle") or ""),
        rating_count=rating_count,
        rating_total=rating_total,
        rating_average=rating_average,
        extra={k: v for k, v in raw.items() if k not in _MODELED_KEYS},
    )


def products_from_records(records: list[Any], source: object) -> list[Product]:
    """Read-side conversion: records that cannot be read are skipped and logged."""
    products: list[Product] = []
    for raw in records:
        if not isinstance(raw, dict):
            continue
        try:
            products.append(product_from_record(raw))
        except ValidationError as exc:
            logger.warning("Skipping catalog record in %s: %s", source, exc)
    return products


def product_to_record(product: Product) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": product.id,
        "name": product.name,
        "price": product.price.to_json(),
        "description": product.description,
        "image": product.image,
    }
    if product.images:
        record["images"] = list(product.images)
    if product.slug:
        record["slug"] = product.slug
    if product.handle:
        record["handle"] = product.handle
    if product.rating_count:
        record["ratingCount"] = product.rating_count
        record["ratingTotal"] = product.rating_total
        record["ratingAverage"] = product.rating_average
    record.update(product.extra)
    return record


def products_from_payload(payload: object) -> list[Product]:
    """Validate an admin "save all" payload.

    The payload must be a list of objects, each with an ``id``.  An entry
    without an id but with a ``slug`` adopts the slug as its id so work
    done under the wrong key is not lost.
    """
    if not isinstance(payload, list):
        raise ValidationError("Body must be an array of products")

    products: list[Product] = []
    for entry in payload:
        if not isinstance(entry, dict):
            raise ValidationError("Each product must have an id (or slug)")
        products.append(product_from_record(entry))
    return products
