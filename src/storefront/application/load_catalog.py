"""Application service: Load Catalog use case.

The storefront reads its catalog from the primary source (the HTTP API
when one is configured) and falls back to the static catalog file when
that fails.  Only when both fail does the caller see an error.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import CatalogUnavailableError, StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class LoadCatalogHandler:

    def __init__(
        self,
        primary: ProductRepository,
        fallback: ProductRepository | None = None,
    ) -> None:
        self._primary = primary
        self._fallback = fallback

    def handle(self) -> list[Product]:
        try:
            return self._primary.list_all()
        except (CatalogUnavailableError, StorageError) as exc:
            if self._fallback is None:
                raise CatalogUnavailableError("Could not load products.") from exc
            logger.warning("Primary catalog unavailable (%s); using fallback", exc)

        try:
            return self._fallback.list_all()
        except (CatalogUnavailableError, StorageError) as exc:
            raise CatalogUnavailableError("Could not load products.") from exc
