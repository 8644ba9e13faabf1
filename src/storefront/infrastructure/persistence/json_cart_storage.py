"""File-backed key/value storage for the cart.

Mirrors browser local storage: one JSON object on disk mapping keys to
JSON-encoded strings, with the cart kept under ``CART_STORAGE_KEY``.
Other keys in the file are left alone.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import StorageError, ValidationError
from storefront.domain.model.cart import CartLine
from storefront.domain.repository.cart_storage import CART_STORAGE_KEY, CartStorage

logger = logging.getLogger(__name__)


class JsonCartStorage(CartStorage):

    def __init__(self, file_path: Path, key: str = CART_STORAGE_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartStorage interface ------------------------------------------------

    def load(self) -> list[CartLine]:
        raw = self._read_entries().get(self._key)
        if not raw:
            return []
        try:
            records = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored cart under %r is corrupt; starting empty", self._key)
            return []
        if not isinstance(records, list):
            logger.warning("Stored cart under %r is not a list; starting empty", self._key)
            return []

        lines: list[CartLine] = []
        for record in records:
            line = self._to_domain(record)
            if line is not None:
                lines.append(line)
        return lines

    def save(self, lines: list[CartLine]) -> None:
        entries = self._read_entries()
        entries[self._key] = json.dumps([self._to_raw(line) for line in lines])
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: CartLine) -> dict:
        return {
            "id": line.product_id,
            "quantity": line.quantity,
            "size": line.size,
            "dogName": line.dog_name,
            "note": line.note,
            "color": line.color,
        }

    @staticmethod
    def _to_domain(record: object) -> CartLine | None:
        if not isinstance(record, dict) or not record.get("id"):
            return None
        try:
            return CartLine(
                product_id=str(record["id"]),
                quantity=record.get("quantity", 1),
                size=str(record.get("size") or ""),
                dog_name=str(record.get("dogName") or ""),
                note=str(record.get("note") or ""),
                color=str(record.get("color") or ""),
            )
        except ValidationError:
            return None

    # --- File helpers ---------------------------------------------------------

    def _read_entries(self) -> dict[str, str]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}
