"""Tests for catalog loading, replacement and ratings."""

import pytest

from storefront.application.catalog_records import (
    product_from_record,
    product_to_record,
    products_from_payload,
)
from storefront.application.load_catalog import LoadCatalogHandler
from storefront.application.rate_product import RateProductHandler
from storefront.application.replace_catalog import ReplaceCatalogHandler
from storefront.domain.exceptions import (
    CatalogUnavailableError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from tests.catalog import full_catalog, rope
from tests.fakes import FakeProductRepository, UnavailableProductRepository


# ── Records ──────────────────────────────────────────────────────────────────


class TestCatalogRecords:

    def test_round_trip_keeps_unknown_keys(self):
        raw = {
            "id": "rope",
            "name": "Chew Rope",
            "price": 9.99,
            "description": "",
            "image": "/rope.jpg",
            "tags": ["toys"],
            "options": {"note": True},
        }
        product = product_from_record(raw)
        assert product.options.note
        assert product_to_record(product) == raw

    def test_ratings_written_only_once_rated(self):
        record = product_to_record(rope())
        assert "ratingCount" not in record

    def test_slug_stands_in_for_id(self):
        assert product_from_record({"slug": "b", "name": "B", "price": 1}).id == "b"

    def test_malformed_rating_fields(self):
        with pytest.raises(ValidationError, match="Invalid product 'a'"):
            product_from_record({"id": "a", "price": 1, "ratingAverage": "great"})

    def test_missing_id(self):
        with pytest.raises(ValidationError, match="must have an id"):
            product_from_record({"name": "x"})

    def test_payload_must_be_list(self):
        with pytest.raises(ValidationError, match="array of products"):
            products_from_payload({"id": "x"})

    def test_payload_slug_adopted_as_id(self):
        products = products_from_payload([{"slug": "new-thing", "name": "New", "price": 1}])
        assert products[0].id == "new-thing"

    def test_payload_entry_without_id_or_slug(self):
        with pytest.raises(ValidationError):
            products_from_payload([{"name": "nameless"}])


# ── Load ─────────────────────────────────────────────────────────────────────


class TestLoadCatalog:

    def test_primary(self):
        products = LoadCatalogHandler(FakeProductRepository(full_catalog())).handle()
        assert [p.id for p in products] == ["harness", "collar", "rope", "bowl"]

    def test_falls_back_when_primary_down(self):
        handler = LoadCatalogHandler(
            UnavailableProductRepository(CatalogUnavailableError("api down")),
            fallback=FakeProductRepository([rope()]),
        )
        assert [p.id for p in handler.handle()] == ["rope"]

    def test_both_down(self):
        handler = LoadCatalogHandler(
            UnavailableProductRepository(CatalogUnavailableError("api down")),
            fallback=UnavailableProductRepository(StorageError("bad file")),
        )
        with pytest.raises(CatalogUnavailableError, match="Could not load products"):
            handler.handle()

    def test_no_fallback(self):
        handler = LoadCatalogHandler(UnavailableProductRepository(StorageError("bad file")))
        with pytest.raises(CatalogUnavailableError):
            handler.handle()


# ── Replace ──────────────────────────────────────────────────────────────────


class TestReplaceCatalog:

    def test_replaces_everything(self):
        repo = FakeProductRepository(full_catalog())
        count = ReplaceCatalogHandler(repo).handle(
            [{"id": "a", "name": "A", "price": 1}, {"slug": "b", "name": "B", "price": 2}]
        )
        assert count == 2
        assert [p.id for p in repo.list_all()] == ["a", "b"]

    def test_invalid_payload_leaves_catalog(self):
        repo = FakeProductRepository(full_catalog())
        with pytest.raises(ValidationError):
            ReplaceCatalogHandler(repo).handle("nope")
        assert len(repo.list_all()) == 4


# ── Rate ─────────────────────────────────────────────────────────────────────


class TestRateProduct:

    def test_accumulates(self):
        repo = FakeProductRepository([rope()])
        handler = RateProductHandler(repo)
        handler.handle("rope", 5)
        product = handler.handle("rope", 2)
        assert product.rating_count == 2
        assert product.rating_total == 7
        assert product.rating_average == 3.5
        assert repo.get_by_id("rope").rating_count == 2

    @pytest.mark.parametrize("value", [0, 6, "5", None])
    def test_invalid_rating(self, value):
        repo = FakeProductRepository([rope()])
        with pytest.raises(ValidationError, match="between 1 and 5"):
            RateProductHandler(repo).handle("rope", value)
        assert repo.get_by_id("rope").rating_count == 0

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            RateProductHandler(FakeProductRepository()).handle("ghost", 3)
