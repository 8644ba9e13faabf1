"""Tests for the JSON-file repositories and cart storage."""

import json
import logging

import pytest

from storefront.domain.exceptions import StorageError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Rating
from storefront.infrastructure.persistence.json_cart_storage import JsonCartStorage
from storefront.infrastructure.persistence.json_post_repository import JsonPostRepository
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.catalog import full_catalog

RECORDS = [
    {"id": "b", "name": "Bee", "price": 2, "description": "", "image": "", "tags": ["x"]},
    {"id": "a", "name": "Ant", "price": 1.5, "description": "", "image": ""},
]


def _write(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


# ── Products ─────────────────────────────────────────────────────────────────


class TestJsonProductRepository:

    def test_missing_file_created_empty(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert repo.list_all() == []
        assert path.read_text(encoding="utf-8") == "[]"

    def test_keeps_file_order(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, RECORDS)
        assert [p.id for p in JsonProductRepository(path).list_all()] == ["b", "a"]

    def test_save_updates_in_place_and_keeps_extra_keys(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, RECORDS)
        repo = JsonProductRepository(path)
        product = repo.get_by_id("b")
        product.record_rating(Rating(4))
        repo.save(product)

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert [r["id"] for r in stored] == ["b", "a"]
        assert stored[0]["tags"] == ["x"]
        assert stored[0]["ratingCount"] == 1
        assert stored[0]["ratingAverage"] == 4.0

    def test_replace_all(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.replace_all(full_catalog()) == 4
        assert [p.id for p in repo.list_all()] == ["harness", "collar", "rope", "bowl"]

    def test_slug_only_record_goes_by_slug(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"slug": "b", "name": "Bee", "price": 2, "description": "", "image": ""}])
        repo = JsonProductRepository(path)
        product = repo.get_by_id("b")
        product.record_rating(Rating(5))
        repo.save(product)

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert len(stored) == 1
        assert stored[0]["id"] == "b"
        assert stored[0]["ratingCount"] == 1

    def test_unreadable_records_skipped_with_warning(self, tmp_path, caplog):
        path = tmp_path / "products.json"
        _write(path, [*RECORDS, {"name": "no key"}, {"id": "c", "price": 1, "ratingCount": "x"}])
        with caplog.at_level(logging.WARNING):
            products = JsonProductRepository(path).list_all()
        assert [p.id for p in products] == ["b", "a"]
        assert "Skipping catalog record" in caplog.text

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonProductRepository(path).list_all()

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, {"id": "a"})
        with pytest.raises(StorageError, match="not a JSON array"):
            JsonProductRepository(path).list_all()


# ── Posts ────────────────────────────────────────────────────────────────────


class TestJsonPostRepository:

    def test_missing_file(self, tmp_path):
        assert JsonPostRepository(tmp_path / "posts.json").list_all() == []

    def test_reads_posts(self, tmp_path):
        path = tmp_path / "posts.json"
        _write(path, [{"title": "Hello", "date": "2025-01-01", "excerpt": "Hi", "author": "Jo"}])
        (post,) = JsonPostRepository(path).list_all()
        assert post.title == "Hello"
        assert JsonPostRepository.to_raw(post)["author"] == "Jo"

    def test_corrupt(self, tmp_path):
        path = tmp_path / "posts.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonPostRepository(path).list_all()


# ── Cart storage ─────────────────────────────────────────────────────────────


class TestJsonCartStorage:

    def test_missing_file_loads_empty(self, tmp_path):
        assert JsonCartStorage(tmp_path / "storage.json").load() == []

    def test_round_trip(self, tmp_path):
        storage = JsonCartStorage(tmp_path / "storage.json")
        lines = [
            CartLine("harness", 2, size="m", dog_name="Rex", note="soft", color="forest"),
            CartLine("rope", 1),
        ]
        storage.save(lines)
        assert storage.load() == lines

    def test_stored_as_string_under_key(self, tmp_path):
        path = tmp_path / "storage.json"
        JsonCartStorage(path).save([CartLine("rope", 3)])
        entries = json.loads(path.read_text(encoding="utf-8"))
        assert json.loads(entries["gf_cart_v1"]) == [
            {"id": "rope", "quantity": 3, "size": "", "dogName": "", "note": "", "color": ""}
        ]

    def test_other_keys_preserved(self, tmp_path):
        path = tmp_path / "storage.json"
        _write(path, {"theme": "\"dark\""})
        JsonCartStorage(path).save([CartLine("rope", 1)])
        assert json.loads(path.read_text(encoding="utf-8"))["theme"] == "\"dark\""

    def test_corrupt_value_loads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        _write(path, {"gf_cart_v1": "[{oops"})
        assert JsonCartStorage(path).load() == []

    def test_non_list_loads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        _write(path, {"gf_cart_v1": json.dumps({"id": "rope"})})
        assert JsonCartStorage(path).load() == []

    def test_malformed_entries_dropped(self, tmp_path):
        path = tmp_path / "storage.json"
        _write(
            path,
            {
                "gf_cart_v1": json.dumps(
                    [
                        {"id": "rope", "quantity": 2},
                        {"quantity": 1},
                        {"id": "bowl", "quantity": 0},
                        "junk",
                        {"id": "collar"},
                    ]
                )
            },
        )
        lines = JsonCartStorage(path).load()
        assert [(line.product_id, line.quantity) for line in lines] == [("rope", 2), ("collar", 1)]

    def test_write_failure_raises(self, tmp_path):
        with pytest.raises(StorageError):
            JsonCartStorage(tmp_path).save([CartLine("rope", 1)])
