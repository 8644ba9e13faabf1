"""Application service: Rate Product use case.

Ratings are a read-modify-write on the catalog.  The lock serializes
concurrent raters inside one process (the threaded HTTP server); it does
not coordinate separate processes sharing the same catalog file.
"""

from __future__ import annotations

import threading

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Rating
from storefront.domain.repository.product_repository import ProductRepository


class RateProductHandler:

    _lock = threading.Lock()

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, rating: object) -> Product:
        value = Rating.of(rating)

        with self._lock:
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product not found.")
            product.record_rating(value)
            self._product_repo.save(product)
        return product
