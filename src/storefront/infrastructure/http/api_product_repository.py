"""Read-only ProductRepository backed by a running storefront's public API."""

from __future__ import annotations

import requests

from storefront.application.catalog_records import products_from_records
from storefront.domain.exceptions import CatalogUnavailableError, StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository

DEFAULT_TIMEOUT = 10


class HttpProductRepository(ProductRepository):

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = base_url.rstrip("/") + "/api/products"
        self._session = session or requests.Session()
        self._timeout = timeout

    def get_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self.list_all() if p.id == product_id), None)

    def list_all(self) -> list[Product]:
        try:
            response = self._session.get(
                self._url, timeout=self._timeout, headers={"Cache-Control": "no-store"}
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise CatalogUnavailableError(f"{self._url}: {exc}") from exc
        if not isinstance(data, list):
            raise CatalogUnavailableError(f"{self._url} did not return a list")
        return products_from_records(data, self._url)

    def save(self, product: Product) -> None:
        raise StorageError("The public catalog API is read-only")

    def replace_all(self, products: list[Product]) -> int:
        raise StorageError("The public catalog API is read-only")
