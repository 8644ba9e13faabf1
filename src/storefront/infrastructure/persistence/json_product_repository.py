"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.application.catalog_records import (
    product_to_record,
    products_from_records,
    record_id,
)
from storefront.domain.exceptions import StorageError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return next((p for p in self.list_all() if p.id == product_id), None)

    def list_all(self) -> list[Product]:
        return products_from_records(self._load_raw(), self._file_path)

    def save(self, product: Product) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if record_id(raw) == product.id:
                records[i] = product_to_record(product)
                replaced = True
                break
        if not replaced:
            records.append(product_to_record(product))
        self._persist_raw(records)

    def replace_all(self, products: list[Product]) -> int:
        self._persist_raw([product_to_record(p) for p in products])
        return len(products)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read catalog {self._file_path}: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(f"Catalog {self._file_path} is not a JSON array")
        return [raw for raw in data if isinstance(raw, dict)]

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
