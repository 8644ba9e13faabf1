"""Application service: Replace Catalog use case (admin).

The admin page edits the whole catalog client-side and saves it in one
request.  Saves are last-writer-wins; there is no conflict detection.
"""

from __future__ import annotations

import logging

from storefront.application.catalog_records import products_from_payload
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ReplaceCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, payload: object) -> int:
        """Validate *payload* and store it as the new catalog."""
        products = products_from_payload(payload)
        count = self._product_repo.replace_all(products)
        logger.info("Catalog replaced with %d products", count)
        return count
